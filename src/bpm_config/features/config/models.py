"""Data models for configuration loading results."""

import hashlib
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field


class LoadResult(BaseModel):
    """Outcome of a successful configuration load.

    Attributes:
        file_name: Resource name inside the deployment.
        deployment_id: Deployment the resource was read from.
        key: Top-level key the result was narrowed to, if any.
        persisted: Whether the result was written to the process variable.
        checksum: SHA-256 checksum of the raw resource bytes.
        value: Loaded (possibly narrowed) value.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    file_name: Annotated[str, Field(min_length=1)]
    deployment_id: Annotated[str, Field(min_length=1)]
    key: str | None = None
    persisted: bool = False
    checksum: Annotated[str, Field(min_length=64, max_length=64)]
    value: Any = None


def compute_checksum(content: bytes) -> str:
    """Compute SHA-256 checksum of resource content.

    Returns:
        Hex-encoded SHA-256 checksum.
    """
    return hashlib.sha256(content).hexdigest()

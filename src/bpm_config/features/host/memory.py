"""In-memory host implementations for embedding and tests."""

import copy
import io
import uuid
from dataclasses import dataclass, field
from typing import Any, BinaryIO

import structlog

from bpm_config.features.config.constants import COMPONENT_HOST
from bpm_config.features.config.errors import (
    DeploymentNotFoundError,
    ResourceNotFoundError,
)
from bpm_config.features.host.protocols import RepositoryService


logger = structlog.get_logger()


class InMemoryRepository:
    """Repository service backed by dictionaries.

    Deployments are stored as ``{deployment_id: {file_name: bytes}}`` and
    process definitions map to the deployment that contains them.
    """

    def __init__(self) -> None:
        """Initialize an empty repository."""
        self._deployments: dict[str, dict[str, bytes]] = {}
        self._definitions: dict[str, str] = {}

    def deploy(
        self,
        resources: dict[str, bytes | str],
        process_definition_ids: list[str] | None = None,
        deployment_id: str | None = None,
    ) -> str:
        """Add a deployment.

        Args:
            resources: Resource name to content; text is encoded as UTF-8.
            process_definition_ids: Process definitions contained in it.
            deployment_id: Explicit id; a UUID is generated when omitted.

        Returns:
            The deployment id.
        """
        deployment_id = deployment_id or str(uuid.uuid4())
        self._deployments[deployment_id] = {
            name: content.encode("utf-8") if isinstance(content, str) else content
            for name, content in resources.items()
        }
        for definition_id in process_definition_ids or []:
            self._definitions[definition_id] = deployment_id

        logger.debug(
            "deployment_registered",
            component=COMPONENT_HOST,
            deployment_id=deployment_id,
            resource_count=len(resources),
        )
        return deployment_id

    def get_deployment_id(self, process_definition_id: str) -> str:
        """Resolve the deployment a process definition belongs to."""
        try:
            return self._definitions[process_definition_id]
        except KeyError:
            raise DeploymentNotFoundError(process_definition_id) from None

    def open_resource(self, deployment_id: str, file_name: str) -> BinaryIO:
        """Open a resource as a fresh in-memory stream."""
        resources = self._deployments.get(deployment_id, {})
        if file_name not in resources:
            raise ResourceNotFoundError(deployment_id, file_name)
        return io.BytesIO(resources[file_name])


@dataclass
class ProcessExecution:
    """Execution context of a single process instance.

    Attributes:
        process_definition_id: Definition the instance was started from.
        repository: Repository service used to resolve resources.
        process_instance_id: Instance identifier (generated when omitted).
    """

    process_definition_id: str
    repository: RepositoryService
    process_instance_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    _variables: dict[str, Any] = field(default_factory=dict, init=False, repr=False)

    @property
    def variables(self) -> dict[str, Any]:
        """Get a deep copy of all process variables."""
        return copy.deepcopy(self._variables)

    def has_variable(self, name: str) -> bool:
        """Check whether a process variable is set."""
        return name in self._variables

    def get_variable(self, name: str) -> Any:
        """Read a process variable."""
        return self._variables[name]

    def set_variable(self, name: str, value: Any) -> None:
        """Write a process variable, replacing any previous value."""
        self._variables[name] = value

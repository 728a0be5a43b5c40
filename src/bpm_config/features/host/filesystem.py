"""Repository service reading deployments from a directory tree.

Layout::

    <root>/
        definitions.yaml        # optional: {process_definition_id: deployment_id}
        <deployment_id>/
            <resource files...>
"""

from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

import structlog
import yaml

from bpm_config.features.config.constants import COMPONENT_HOST
from bpm_config.features.config.errors import (
    DeploymentNotFoundError,
    ResourceNotFoundError,
)


if TYPE_CHECKING:
    from bpm_config.settings import AppSettings

logger = structlog.get_logger()

DEFINITIONS_FILE = "definitions.yaml"


class FileSystemRepository:
    """Repository service where each sub-directory of root is a deployment."""

    def __init__(
        self,
        root: Path | str,
        definitions: dict[str, str] | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            root: Directory holding one sub-directory per deployment.
            definitions: Process definition id to deployment id. Entries here
                override those read from ``definitions.yaml``.
        """
        self._root = Path(root) if isinstance(root, str) else root
        self._definitions = self._read_definitions_file()
        self._definitions.update(definitions or {})
        self._log = logger.bind(component=COMPONENT_HOST, root=str(self._root))

    @classmethod
    def from_settings(cls, settings: "AppSettings") -> "FileSystemRepository":
        """Create a repository rooted at the configured deployments directory.

        Raises:
            ValueError: If no deployments root is configured.
        """
        if settings.deployments_root is None:
            msg = "deployments_root is not configured"
            raise ValueError(msg)
        return cls(settings.deployments_root)

    @property
    def root(self) -> Path:
        """Get the deployments root directory."""
        return self._root

    def _read_definitions_file(self) -> dict[str, str]:
        path = self._root / DEFINITIONS_FILE
        if not path.is_file():
            return {}
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            msg = f"{path} must contain a mapping of definition id to deployment id"
            raise ValueError(msg)
        return {str(k): str(v) for k, v in data.items()}

    def register(self, process_definition_id: str, deployment_id: str) -> None:
        """Link a process definition to a deployment directory."""
        self._definitions[process_definition_id] = deployment_id

    def get_deployment_id(self, process_definition_id: str) -> str:
        """Resolve the deployment a process definition belongs to."""
        deployment_id = self._definitions.get(process_definition_id)
        if deployment_id is None:
            raise DeploymentNotFoundError(process_definition_id)
        return deployment_id

    def _resolve(self, deployment_id: str, file_name: str) -> Path:
        root = self._root.resolve()
        deployment_dir = (root / deployment_id).resolve()
        if deployment_dir.parent != root or not deployment_dir.is_dir():
            raise ResourceNotFoundError(deployment_id, file_name)

        path = (deployment_dir / file_name).resolve()
        if not path.is_relative_to(deployment_dir) or not path.is_file():
            raise ResourceNotFoundError(deployment_id, file_name)
        return path

    def open_resource(self, deployment_id: str, file_name: str) -> BinaryIO:
        """Open a resource file in binary mode."""
        path = self._resolve(deployment_id, file_name)
        self._log.debug(
            "opening_resource",
            deployment_id=deployment_id,
            file_name=file_name,
        )
        return path.open("rb")

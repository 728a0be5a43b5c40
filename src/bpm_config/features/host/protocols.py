"""Contracts the host workflow engine provides to script tasks."""

from typing import Any, BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class RepositoryService(Protocol):
    """Access to deployed process definitions and their resources."""

    def get_deployment_id(self, process_definition_id: str) -> str:
        """Resolve the deployment a process definition belongs to.

        Raises:
            DeploymentNotFoundError: If the definition is unknown.
        """
        ...

    def open_resource(self, deployment_id: str, file_name: str) -> BinaryIO:
        """Open a deployment resource for reading.

        The caller owns the returned stream and must close it.

        Raises:
            ResourceNotFoundError: If the resource is not in the deployment.
        """
        ...


@runtime_checkable
class ExecutionContext(Protocol):
    """Runtime handle of a running script task."""

    @property
    def process_definition_id(self) -> str:
        """Identifier of the executing process definition."""
        ...

    @property
    def process_instance_id(self) -> str:
        """Identifier of the executing process instance."""
        ...

    @property
    def repository(self) -> RepositoryService:
        """Repository service of the engine."""
        ...

    def has_variable(self, name: str) -> bool:
        """Check whether a process variable is set."""
        ...

    def get_variable(self, name: str) -> Any:
        """Read a process variable.

        Raises:
            KeyError: If the variable is not set.
        """
        ...

    def set_variable(self, name: str, value: Any) -> None:
        """Write a process variable, replacing any previous value."""
        ...

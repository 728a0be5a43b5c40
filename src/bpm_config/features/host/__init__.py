"""Host engine collaborators: repository service and execution context."""

from bpm_config.features.host.filesystem import FileSystemRepository
from bpm_config.features.host.memory import InMemoryRepository, ProcessExecution
from bpm_config.features.host.protocols import ExecutionContext, RepositoryService


__all__ = [
    "ExecutionContext",
    "FileSystemRepository",
    "InMemoryRepository",
    "ProcessExecution",
    "RepositoryService",
]

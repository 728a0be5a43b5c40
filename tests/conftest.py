"""Shared fixtures for configuration loading tests."""

from collections.abc import Iterator

import pytest

from bpm_config.features.host import InMemoryRepository, ProcessExecution
from bpm_config.features.observability.metrics import ConfigMetrics


PROCESS_DEFINITION_ID = "myProcess:1:42"
DEPLOYMENT_ID = "deployment-42"

SAMPLE_CONFIG = '{"myProcess": {"a": 1}, "other": 2}'


@pytest.fixture(autouse=True)
def reset_metrics() -> Iterator[None]:
    """Give every test a fresh metrics singleton."""
    ConfigMetrics.reset()
    yield
    ConfigMetrics.reset()


@pytest.fixture
def repository() -> InMemoryRepository:
    """Repository holding a single deployment with sample resources."""
    repo = InMemoryRepository()
    repo.deploy(
        {
            "config.json": SAMPLE_CONFIG,
            "array.json": "[1, 2, 3]",
            "scalar.json": '"just text"',
            "broken.json": '{"myProcess": ',
            "settings.yaml": "myProcess:\n  retries: 3\nother: true\n",
        },
        process_definition_ids=[PROCESS_DEFINITION_ID],
        deployment_id=DEPLOYMENT_ID,
    )
    return repo


@pytest.fixture
def execution(repository: InMemoryRepository) -> ProcessExecution:
    """Execution context of a process started from the sample deployment."""
    return ProcessExecution(
        process_definition_id=PROCESS_DEFINITION_ID,
        repository=repository,
        process_instance_id="instance-1",
    )


@pytest.fixture
def deployment_id() -> str:
    """Id of the sample deployment."""
    return DEPLOYMENT_ID


@pytest.fixture
def sample_config() -> str:
    """Raw text of the sample config.json resource."""
    return SAMPLE_CONFIG

"""Configuration loader for process deployment resources."""

import json
import time
import uuid
from typing import TYPE_CHECKING

import structlog

from bpm_config.features.config.constants import (
    COMPONENT_CONFIG,
    CONFIG_VARIABLE_NAME,
)
from bpm_config.features.config.errors import (
    ConfigLoadError,
    ConfigParseError,
    DeploymentNotFoundError,
    MissingKeyError,
    ResourceNotFoundError,
)
from bpm_config.features.config.models import LoadResult, compute_checksum
from bpm_config.features.config.parser import decode_resource, parse_config_text
from bpm_config.features.config.state_machine import ConfigState, ConfigStateMachine
from bpm_config.features.config.value import ConfigValue
from bpm_config.features.observability.logging import run_context
from bpm_config.features.observability.metrics import ConfigMetrics


if TYPE_CHECKING:
    from bpm_config.features.host.protocols import ExecutionContext

logger = structlog.get_logger()

# Error type recorded for failures raised by the host rather than the loader
UNEXPECTED_ERROR_TYPE = "unexpected_error"

# Log event emitted for each error type before the error is re-raised
_FAILURE_EVENTS: dict[str, str] = {
    DeploymentNotFoundError.error_type: "config_deployment_not_found",
    ResourceNotFoundError.error_type: "config_resource_not_found",
    ConfigParseError.error_type: "config_parse_error",
    MissingKeyError.error_type: "config_missing_key",
}


class ConfigLoader:
    """Loads a configuration resource from the running process's deployment.

    Implements a state machine for a single load:
    UNLOADED -> FETCHING -> PARSED -> READY

    A loader performs exactly one load. Use ``load_config`` for one-off
    calls.
    """

    def __init__(self, context: "ExecutionContext", run_id: str | None = None) -> None:
        """Initialize the loader.

        Args:
            context: Execution context of the calling script task.
            run_id: Optional identifier for logging context.
        """
        self._context = context
        self._run_id = run_id or str(uuid.uuid4())
        self._state_machine = ConfigStateMachine()
        self._metrics = ConfigMetrics.get_instance()
        self._file_name: str | None = None
        self._deployment_id: str | None = None
        self._checksum: str | None = None
        self._error: dict[str, str] | None = None
        self._load_duration_ms: float = 0
        self._last_result: LoadResult | None = None

    @property
    def state(self) -> ConfigState:
        """Get the current loader state."""
        return self._state_machine.state

    @property
    def run_id(self) -> str:
        """Get the run ID."""
        return self._run_id

    @property
    def load_duration_ms(self) -> float:
        """Get load duration in milliseconds."""
        return self._load_duration_ms

    @property
    def last_result(self) -> LoadResult | None:
        """Get the result of a successful load, if any."""
        return self._last_result

    def _read_resource(self, deployment_id: str, file_name: str) -> bytes:
        with self._context.repository.open_resource(deployment_id, file_name) as stream:
            return stream.read()

    def load(
        self,
        file_name: str,
        key: str | None = None,
        persist: bool = False,
    ) -> ConfigValue:
        """Load, parse and optionally narrow and persist a configuration.

        Exceptions raised by the host are recorded as a failed load and
        re-raised unchanged.

        Args:
            file_name: Resource name inside the current deployment.
            key: Top-level key to narrow the result to.
            persist: Whether to write the result to the ``_config`` variable.

        Returns:
            The parsed (and possibly narrowed) configuration value.

        Raises:
            DeploymentNotFoundError: If the deployment cannot be resolved.
            ResourceNotFoundError: If the resource is not in the deployment.
            ConfigParseError: If the content is not valid structured data.
            MissingKeyError: If ``key`` is not a top-level field.
            ConfigStateError: If the loader was already used.
        """
        start_time = time.perf_counter()
        self._state_machine.transition(ConfigState.FETCHING)
        self._file_name = file_name

        log = logger.bind(
            run_id=self._run_id,
            component=COMPONENT_CONFIG,
            process_instance_id=self._context.process_instance_id,
            file_name=file_name,
        )

        try:
            deployment_id = self._context.repository.get_deployment_id(
                self._context.process_definition_id
            )
            self._deployment_id = deployment_id
            log.info(
                "loading_config_resource",
                phase=ConfigState.FETCHING.name,
                deployment_id=deployment_id,
            )

            content = self._read_resource(deployment_id, file_name)
            self._checksum = compute_checksum(content)
            value = parse_config_text(decode_resource(content, file_name), file_name)

            self._state_machine.transition(ConfigState.PARSED)
            log.info(
                "config_resource_parsed",
                phase=ConfigState.PARSED.name,
                file_sha256=self._checksum,
                kind=value.kind.value,
            )

            if key is not None:
                if not value.has_key(key):
                    raise MissingKeyError(key)
                value = value.get_key(key)
                log.info("config_key_selected", key=key, kind=value.kind.value)

            if persist:
                self._context.set_variable(CONFIG_VARIABLE_NAME, value.to_python())
                log.info("config_persisted", variable=CONFIG_VARIABLE_NAME)

        except Exception as e:
            self._handle_error(e, log, start_time)
            raise

        self._state_machine.transition(ConfigState.READY)
        self._load_duration_ms = (time.perf_counter() - start_time) * 1000
        self._metrics.record_load(self._load_duration_ms, persisted=persist)
        self._last_result = LoadResult(
            file_name=file_name,
            deployment_id=deployment_id,
            key=key,
            persisted=persist,
            checksum=self._checksum,
            value=value.value,
        )
        log.info(
            "config_ready",
            phase=ConfigState.READY.name,
            load_duration_ms=self._load_duration_ms,
        )
        return value

    def _handle_error(
        self,
        error: Exception,
        log: structlog.stdlib.BoundLogger,
        start_time: float,
    ) -> None:
        """Record a failed load before the error propagates."""
        if isinstance(error, ConfigLoadError):
            error_type = error.error_type
        else:
            error_type = UNEXPECTED_ERROR_TYPE

        self._state_machine.transition(ConfigState.FAILED)
        self._load_duration_ms = (time.perf_counter() - start_time) * 1000
        self._metrics.record_failure(error_type, self._load_duration_ms)
        self._error = {"type": error_type, "msg": str(error)}
        log.error(
            _FAILURE_EVENTS.get(error_type, "config_load_failed"),
            phase=ConfigState.FAILED.name,
            error_type=error_type,
            error=str(error),
        )

    def get_load_summary(self) -> dict[str, object]:
        """Get a summary of the load.

        Returns:
            Dictionary with load summary.
        """
        return {
            "run_id": self._run_id,
            "state": self._state_machine.state.name,
            "file_name": self._file_name,
            "deployment_id": self._deployment_id,
            "file_sha256": self._checksum,
            "error": self._error,
            "load_duration_ms": self._load_duration_ms,
        }

    def get_load_summary_json(self) -> str:
        """Get load summary as JSON string with stable ordering."""
        return json.dumps(self.get_load_summary(), sort_keys=True, indent=2)


def load_config(
    context: "ExecutionContext",
    file_name: str,
    key: str | None = None,
    persist: bool = False,
) -> ConfigValue:
    """Load a configuration resource from the current deployment.

    Example, from a script task::

        config = load_config(execution, "config.json", key="myProcess", persist=True)

    Args:
        context: Execution context of the calling script task.
        file_name: Resource name inside the current deployment.
        key: Top-level key to narrow the result to.
        persist: Whether to write the result to the ``_config`` variable.

    Returns:
        The parsed (and possibly narrowed) configuration value.
    """
    loader = ConfigLoader(context)
    with run_context(loader.run_id, context.process_instance_id):
        return loader.load(file_name, key=key, persist=persist)

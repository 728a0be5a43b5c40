"""Structured logging configuration."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

import structlog


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = True,
) -> None:
    """Configure structured logging for script tasks.

    Args:
        level: Logging level (default: INFO).
        output: Output stream (default: stderr).
        json_format: Whether to use JSON format (default: True).
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=True,
    )

    # Host engines often log through the standard library
    logging.basicConfig(
        format="%(message)s",
        stream=output,
        level=level,
    )


@contextmanager
def run_context(run_id: str, process_instance_id: str) -> Iterator[None]:
    """Bind run and process instance to every log line inside the block.

    Values bound by the host before entering are restored on exit, so script
    tasks nested in a larger engine run keep their outer context.

    Args:
        run_id: Unique run identifier.
        process_instance_id: Process instance executing the script task.
    """
    with structlog.contextvars.bound_contextvars(
        run_id=run_id, process_instance_id=process_instance_id
    ):
        yield

"""Decoding and parsing of deployment resources."""

import json
from typing import Any, NoReturn

import yaml

from bpm_config.features.config.constants import RESOURCE_ENCODING, YAML_SUFFIXES
from bpm_config.features.config.errors import ConfigParseError
from bpm_config.features.config.value import ConfigValue


TOO_DEEP_MESSAGE = "document nested too deeply"


def is_yaml_resource(file_name: str) -> bool:
    """Check whether a resource should be parsed as YAML."""
    return file_name.lower().endswith(YAML_SUFFIXES)


def decode_resource(content: bytes, file_name: str) -> str:
    """Decode raw resource bytes as UTF-8.

    Args:
        content: Full resource content.
        file_name: Resource name for error reporting.

    Returns:
        Decoded text.

    Raises:
        ConfigParseError: If the bytes are not valid UTF-8.
    """
    try:
        return content.decode(RESOURCE_ENCODING)
    except UnicodeDecodeError as e:
        raise ConfigParseError(file_name, f"invalid UTF-8: {e.reason}") from e


def _reject_constant(name: str) -> NoReturn:
    msg = f"Non-standard JSON constant: {name}"
    raise ValueError(msg)


def _parse_json(text: str, file_name: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def _is_empty_document(node: yaml.Node) -> bool:
    # An explicit "---" with no content composes to an implicit empty null scalar
    return (
        isinstance(node, yaml.ScalarNode)
        and node.tag == "tag:yaml.org,2002:null"
        and node.value == ""
    )


def _parse_yaml(text: str, file_name: str) -> Any:
    loader = yaml.SafeLoader(text)
    try:
        node = loader.get_single_node()
        if node is None or _is_empty_document(node):
            raise ConfigParseError(file_name, "empty document")
        return loader.construct_document(node)
    finally:
        loader.dispose()


def parse_config_text(text: str, file_name: str) -> ConfigValue:
    """Parse resource text into a ConfigValue.

    ``.yaml`` and ``.yml`` resources are parsed with the YAML safe loader; all
    other resources are parsed as strict JSON.

    Args:
        text: Decoded resource content.
        file_name: Resource name, used to select the parser and for errors.

    Returns:
        Parsed configuration value.

    Raises:
        ConfigParseError: If the content is empty, malformed, nested too
            deeply, or contains values that are not JSON-like.
    """
    if not text.strip():
        raise ConfigParseError(file_name, "empty document")

    parse = _parse_yaml if is_yaml_resource(file_name) else _parse_json
    try:
        raw = parse(text, file_name)
    except json.JSONDecodeError as e:
        msg = f"{e.msg} (line {e.lineno}, column {e.colno})"
        raise ConfigParseError(file_name, msg) from e
    except yaml.YAMLError as e:
        raise ConfigParseError(file_name, str(e)) from e
    except ValueError as e:
        raise ConfigParseError(file_name, str(e)) from e
    except RecursionError as e:
        raise ConfigParseError(file_name, TOO_DEEP_MESSAGE) from e

    try:
        return ConfigValue.from_raw(raw)
    except (TypeError, ValueError) as e:
        raise ConfigParseError(file_name, str(e)) from e
    except RecursionError as e:
        raise ConfigParseError(file_name, TOO_DEEP_MESSAGE) from e

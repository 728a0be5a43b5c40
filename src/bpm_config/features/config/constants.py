"""Constants for the configuration module."""

# Process variable that receives persisted configuration
CONFIG_VARIABLE_NAME = "_config"

# Resource encoding expected in deployments
RESOURCE_ENCODING = "utf-8"

# File suffixes parsed as YAML; everything else is parsed as JSON
YAML_SUFFIXES = (".yaml", ".yml")

# Log component names
COMPONENT_CONFIG = "config"
COMPONENT_HOST = "host"

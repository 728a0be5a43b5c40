"""Application settings loading."""

from .app import AppSettings, configure_logging_from_settings, get_settings


__all__ = ["AppSettings", "configure_logging_from_settings", "get_settings"]

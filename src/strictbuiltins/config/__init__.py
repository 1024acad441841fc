"""Ambient configuration: logging."""

from strictbuiltins.config.logging import configure_logging

__all__ = ["configure_logging"]

"""Support utilities for essential_core."""
from .logging_config import configure_logging

__all__ = ["configure_logging"]

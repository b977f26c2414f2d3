"""
Observability for the pattern catalog.

Structured logging and event hooks for monitoring demo runs.
"""

from .hooks import (
    CatalogEvent,
    EventData,
    EventHookRegistry,
    default_hook_registry,
)
from .logging import CatalogLogger, configure_logging, get_logger

__all__ = [
    # Logging
    "CatalogLogger",
    "configure_logging",
    "get_logger",
    # Hooks
    "CatalogEvent",
    "EventData",
    "EventHookRegistry",
    "default_hook_registry",
]

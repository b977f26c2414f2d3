"""
Design pattern catalog.

Small, self-contained examples of the classical behavioral, creational and
structural design patterns, plus a runner that captures and records what
each example prints.
"""

from catalog.catalog import Catalog
from catalog.config import CatalogConfig
from catalog.observability import (
    CatalogEvent,
    CatalogLogger,
    EventData,
    EventHookRegistry,
    configure_logging,
    default_hook_registry,
    get_logger,
)
from catalog.registry import DemoDefinition, DemoRegistry, PatternCategory, demo
from catalog.transcript import Transcript, TranscriptEntry

__all__ = [
    # Core components
    "Catalog",
    "CatalogConfig",
    "DemoDefinition",
    "DemoRegistry",
    "PatternCategory",
    "Transcript",
    "TranscriptEntry",
    "demo",
    # Observability
    "CatalogEvent",
    "CatalogLogger",
    "EventData",
    "EventHookRegistry",
    "configure_logging",
    "default_hook_registry",
    "get_logger",
]

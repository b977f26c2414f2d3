import logging

import pytest

from catalog.catalog import Catalog
from catalog.observability.hooks import EventHookRegistry
from catalog.observability.logging import ROOT_LOGGER_NAME
from catalog.patterns.creational.singleton import Singleton
from catalog.registry import DemoRegistry
from catalog.transcript import Transcript


@pytest.fixture(autouse=True)
def reset_singleton():
    """Every test starts without a Singleton instance."""
    Singleton.reset()
    yield
    Singleton.reset()


@pytest.fixture(autouse=True)
def reset_catalog_logging():
    """Drop handlers configure_logging attached during a test."""
    yield
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


@pytest.fixture
def registry():
    """Registry with every demo under catalog.patterns."""
    demo_registry = DemoRegistry()
    demo_registry.discover_package("catalog.patterns")
    return demo_registry


@pytest.fixture
def hooks():
    return EventHookRegistry()


@pytest.fixture
def catalog(registry, hooks):
    """Catalog isolated from the default hook registry."""
    return Catalog(
        registry=registry,
        transcript=Transcript(),
        hook_registry=hooks,
        session_id="test-session",
    )


@pytest.fixture
def run_demo(catalog):
    """Run a demo without echoing and return its output lines."""

    def _run(name):
        return catalog.run_demo(name, echo=False).splitlines()

    return _run

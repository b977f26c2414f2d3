"""
Catalog runner for the pattern demos.

This module provides a Catalog class that looks demos up in a registry,
runs them with their stdout captured, and records the output in a
transcript while reporting progress through logging and event hooks.
"""

# pylint: disable=too-many-arguments, too-many-positional-arguments

import contextlib
import io
import sys
import time
import uuid
from typing import Dict, Iterable, List, Optional

from catalog.observability.hooks import (
    CatalogEvent,
    EventHookRegistry,
    default_hook_registry,
)
from catalog.observability.logging import CatalogLogger, get_logger
from catalog.registry import DemoDefinition, DemoRegistry, PatternCategory
from catalog.transcript import Transcript

PATTERNS_PACKAGE = "catalog.patterns"
BANNER_WIDTH = 60


class Catalog:
    """Runs registered pattern demos.

    Usage:
        catalog = Catalog()
        output = catalog.run_demo("observer")
        outputs = catalog.run_category(PatternCategory.STRUCTURAL)
        catalog.transcript.get_output("observer")
    """

    def __init__(
        self,
        registry: Optional[DemoRegistry] = None,
        transcript: Optional[Transcript] = None,
        hook_registry: Optional[EventHookRegistry] = None,
        session_id: Optional[str] = None,
    ) -> None:
        """Initialize the catalog.

        Args:
            registry: Demo registry (defaults to every demo in catalog.patterns)
            transcript: Transcript that receives captured output
            hook_registry: Event hook registry for observability
            session_id: Session identifier for logging/tracing
        """
        if registry is None:
            registry = DemoRegistry()
            registry.discover_package(PATTERNS_PACKAGE)

        self._registry = registry
        self._transcript = transcript if transcript is not None else Transcript()
        self._hooks = hook_registry or default_hook_registry
        self.session_id = session_id or str(uuid.uuid4())

        self._logger: CatalogLogger = get_logger(
            name="runner",
            session_id=self.session_id,
        )
        self._logger.info(
            "Catalog initialized",
            extra={"demos": len(self._registry)},
        )

    @property
    def registry(self) -> DemoRegistry:
        return self._registry

    @property
    def transcript(self) -> Transcript:
        """Get the transcript of captured demo output."""
        return self._transcript

    def get_demo(self, name: str) -> Optional[DemoDefinition]:
        """Get a demo definition by name, or None if unknown."""
        return self._registry.get(name)

    def list_demos(self) -> List[str]:
        return self._registry.list_demos()

    def list_by_category(self) -> Dict[PatternCategory, List[str]]:
        return self._registry.list_by_category()

    def describe(self, name: str) -> str:
        """Return a one-line ``Title (category): description`` summary.

        Raises:
            ValueError: If the demo is not registered
        """
        definition = self._require(name)
        return (
            f"{definition.title} ({definition.category.value}): "
            f"{definition.description}"
        )

    def _require(self, name: str) -> DemoDefinition:
        definition = self._registry.get(name)
        if definition is None:
            raise ValueError(f"Demo '{name}' not found")
        return definition

    def run_demo(self, name: str, echo: bool = True) -> str:
        """Run a single demo and capture its output.

        Args:
            name: Demo name
            echo: Whether to write the captured output to stdout as well

        Returns:
            Everything the demo printed

        Raises:
            ValueError: If the demo is not registered
        """
        definition = self._require(name)
        category = definition.category.value
        start_time = time.perf_counter()

        self._hooks.trigger(
            CatalogEvent.DEMO_START,
            demo_name=name,
            session_id=self.session_id,
            data={"category": category},
        )
        self._logger.debug("Demo starting", demo_name=name, category=category)

        buffer = io.StringIO()
        try:
            with contextlib.redirect_stdout(buffer):
                definition().run()
        except Exception as e:  # pylint: disable=broad-exception-caught
            duration_ms = (time.perf_counter() - start_time) * 1000

            self._hooks.trigger(
                CatalogEvent.DEMO_ERROR,
                demo_name=name,
                session_id=self.session_id,
                duration_ms=duration_ms,
                error=e,
            )
            self._logger.error(
                f"Demo failed: {e}",
                demo_name=name,
                category=category,
                duration_ms=duration_ms,
                exc_info=True,
            )
            raise

        output = buffer.getvalue()
        duration_ms = (time.perf_counter() - start_time) * 1000

        self._transcript.set_output(
            name, output, category=category, duration_ms=round(duration_ms, 3)
        )

        if echo:
            sys.stdout.write(output)
            sys.stdout.flush()

        self._hooks.trigger(
            CatalogEvent.DEMO_END,
            demo_name=name,
            session_id=self.session_id,
            duration_ms=duration_ms,
            data={"category": category, "lines": len(output.splitlines())},
        )
        self._logger.info(
            "Demo completed",
            demo_name=name,
            category=category,
            duration_ms=duration_ms,
        )

        return output

    def run_category(
        self,
        category: PatternCategory | str,
        echo: bool = True,
    ) -> Dict[str, str]:
        """Run every demo of one category.

        Args:
            category: Category or its value (``"behavioral"`` ...)
            echo: Whether to print banners and output

        Returns:
            Dictionary of demo name -> captured output
        """
        if isinstance(category, str):
            try:
                category = PatternCategory(category.lower())
            except ValueError as exc:
                raise ValueError(f"Unknown category: {category}") from exc

        names = self._registry.list_by_category()[category]
        return self._run_many(names, echo=echo, scope=category.value)

    def run_all(
        self,
        names: Optional[Iterable[str]] = None,
        echo: bool = True,
    ) -> Dict[str, str]:
        """Run several demos in order.

        Args:
            names: Demo names to run (None for every registered demo)
            echo: Whether to print banners and output

        Returns:
            Dictionary of demo name -> captured output

        Raises:
            ValueError: If any name is not registered (checked before running)
        """
        selected = list(names) if names is not None else self._registry.list_demos()
        for name in selected:
            self._require(name)
        return self._run_many(selected, echo=echo, scope="all")

    def _run_many(self, names: List[str], echo: bool, scope: str) -> Dict[str, str]:
        start_time = time.perf_counter()

        self._hooks.trigger(
            CatalogEvent.CATALOG_START,
            session_id=self.session_id,
            data={"scope": scope, "demos": len(names)},
        )
        self._logger.info(
            f"Running {len(names)} demos",
            extra={"scope": scope},
        )

        outputs: Dict[str, str] = {}
        for name in names:
            if echo:
                self._print_banner(name)
            outputs[name] = self.run_demo(name, echo=echo)

        duration_ms = (time.perf_counter() - start_time) * 1000

        self._hooks.trigger(
            CatalogEvent.CATALOG_END,
            session_id=self.session_id,
            duration_ms=duration_ms,
            data={"scope": scope, "demos_completed": len(outputs)},
        )
        self._logger.info(
            f"Completed {len(outputs)} demos",
            duration_ms=duration_ms,
            extra={"scope": scope},
        )

        return outputs

    def _print_banner(self, name: str) -> None:
        definition = self._require(name)
        print("\n" + "=" * BANNER_WIDTH)
        print(f"{definition.title} Pattern ({definition.category.value})")
        print("=" * BANNER_WIDTH)

    def __repr__(self) -> str:
        return f"Catalog(demos={len(self._registry)}, transcript={self._transcript!r})"

"""
Demo registration and discovery.

Pattern modules register their demo class with the ``@demo`` decorator.
A ``DemoRegistry`` collects those registrations, optionally after importing
every module of a package so the decorators get a chance to run.
"""

import importlib
import pkgutil
from dataclasses import dataclass
from enum import Enum
from types import ModuleType
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Type

from catalog.observability.hooks import CatalogEvent, default_hook_registry
from catalog.observability.logging import get_logger

if TYPE_CHECKING:
    from catalog.patterns.base import PatternDemo


class PatternCategory(Enum):
    """The three classical families of design patterns."""

    BEHAVIORAL = "behavioral"
    CREATIONAL = "creational"
    STRUCTURAL = "structural"


@dataclass
class DemoDefinition:
    """Definition of a registered demo.

    Attributes:
        name: Unique snake_case key, e.g. ``chain_of_responsibility``
        category: Pattern family the demo belongs to
        description: One-line summary of the pattern
        demo_class: The ``PatternDemo`` subclass that runs the example
    """

    name: str
    category: PatternCategory
    description: str
    demo_class: Type["PatternDemo"]

    @property
    def title(self) -> str:
        """Human-readable pattern name, e.g. ``Chain Of Responsibility``."""
        return self.name.replace("_", " ").title()

    def __call__(self) -> "PatternDemo":
        """Create a fresh demo instance."""
        return self.demo_class()


# Global registry filled by the @demo decorator
_DEMO_REGISTRY: Dict[str, DemoDefinition] = {}

_logger = get_logger("registry")


def demo(
    name: str,
    category: PatternCategory,
    description: str = "",
) -> Callable[[Type["PatternDemo"]], Type["PatternDemo"]]:
    """Decorator to register a ``PatternDemo`` subclass.

    Usage:
        @demo(name="observer", category=PatternCategory.BEHAVIORAL)
        class ObserverDemo(PatternDemo):
            def run(self) -> None:
                ...

    Args:
        name: Demo key
        category: Pattern family
        description: Summary (defaults to the class docstring)

    Returns:
        Decorator that registers and returns the class unchanged
    """

    def decorator(cls: Type["PatternDemo"]) -> Type["PatternDemo"]:
        doc = (cls.__doc__ or "").strip().splitlines()
        definition = DemoDefinition(
            name=name,
            category=category,
            description=description or (doc[0] if doc else ""),
            demo_class=cls,
        )
        _DEMO_REGISTRY[name] = definition

        default_hook_registry.trigger(
            CatalogEvent.DEMO_REGISTERED,
            demo_name=name,
            category=category.value,
        )
        _logger.debug(f"Registered demo: {name}", demo_name=name, category=category.value)

        return cls

    return decorator


class DemoRegistry:
    """Registry for looking up and discovering demos."""

    def __init__(self) -> None:
        """Initialize the registry with everything registered so far."""
        self._demos: Dict[str, DemoDefinition] = {}
        self._load_global_registry()

    def _load_global_registry(self) -> None:
        for name, definition in _DEMO_REGISTRY.items():
            self._demos.setdefault(name, definition)

    def register(self, definition: DemoDefinition) -> None:
        """Register a demo definition, replacing any with the same name."""
        self._demos[definition.name] = definition

    def get(self, name: str) -> Optional[DemoDefinition]:
        """Get a demo by name.

        Args:
            name: The demo key

        Returns:
            DemoDefinition if found, None otherwise
        """
        return self._demos.get(name)

    def list_demos(self) -> List[str]:
        """Get all demo names, grouped by category then sorted by name."""
        order = list(PatternCategory)
        return [
            d.name
            for d in sorted(
                self._demos.values(),
                key=lambda d: (order.index(d.category), d.name),
            )
        ]

    def list_by_category(self) -> Dict[PatternCategory, List[str]]:
        """Get demo names keyed by category (empty categories included)."""
        grouped: Dict[PatternCategory, List[str]] = {c: [] for c in PatternCategory}
        for name in self.list_demos():
            grouped[self._demos[name].category].append(name)
        return grouped

    def get_all(self) -> Dict[str, DemoDefinition]:
        """Get all registered demos."""
        return dict(self._demos)

    def __len__(self) -> int:
        return len(self._demos)

    def __contains__(self, name: object) -> bool:
        return name in self._demos

    def discover_package(self, package: ModuleType | str) -> int:
        """Import every module below a package and register its demos.

        Args:
            package: Package object or dotted package name

        Returns:
            Number of demos discovered
        """
        if isinstance(package, str):
            package = importlib.import_module(package)

        initial_count = len(self._demos)
        prefix = f"{package.__name__}."

        for module_info in pkgutil.walk_packages(package.__path__, prefix):
            try:
                importlib.import_module(module_info.name)
            except Exception as e:  # pylint: disable=broad-exception-caught
                _logger.warning(f"Failed to load demo module {module_info.name}: {e}")

        self._load_global_registry()

        return len(self._demos) - initial_count

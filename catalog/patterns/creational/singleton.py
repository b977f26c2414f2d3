"""
Singleton pattern.

``Singleton.get_instance()`` is the only way to obtain the object; the
first call creates it, later calls return the same instance.
"""

import threading
from typing import Any, Optional

from catalog.observability.logging import get_logger
from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo

logger = get_logger("patterns.singleton")

_CREATION_KEY = object()


class Singleton:
    """Class with exactly one instance per process."""

    _instance: Optional["Singleton"] = None
    _lock = threading.Lock()

    def __init__(self, _key: object = None) -> None:
        if _key is not _CREATION_KEY:
            raise TypeError("Singleton cannot be instantiated directly; use Singleton.get_instance()")

    @classmethod
    def get_instance(cls) -> "Singleton":
        """Return the single instance, creating it on first use."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls(_CREATION_KEY)
                logger.debug("Singleton instance created")
                print("Created new Instance of object.")
            else:
                print("Returning already existing Instance of object.")
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the current instance so the next call creates a new one."""
        with cls._lock:
            cls._instance = None

    def show_message(self) -> None:
        print("Hello, I am a Singleton!")

    def __copy__(self) -> "Singleton":
        return self

    def __deepcopy__(self, memo: Any) -> "Singleton":
        return self


@demo(
    name="singleton",
    category=PatternCategory.CREATIONAL,
    description="Ensure a class has one instance with a global access point.",
)
class SingletonDemo(PatternDemo):
    """Ask for the instance twice; only the first request creates it."""

    def run(self) -> None:
        # start from scratch so repeated runs print the same thing
        Singleton.reset()

        singleton = Singleton.get_instance()
        singleton.show_message()

        singleton2 = Singleton.get_instance()
        singleton2.show_message()

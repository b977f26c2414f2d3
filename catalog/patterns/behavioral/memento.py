"""
Memento pattern.

The originator snapshots its state into mementos; a caretaker keeps them
without looking inside, and hands them back for restoring.
"""

from dataclasses import dataclass
from typing import List, Optional

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


@dataclass(frozen=True)
class Memento:
    """Immutable snapshot of an originator's state."""

    state: str


class Originator:
    """Object whose state is saved and restored."""

    def __init__(self) -> None:
        self._state = ""

    def set_state(self, state: str) -> None:
        self._state = state

    def get_state(self) -> str:
        return self._state

    def create_memento(self) -> Memento:
        return Memento(self._state)

    def restore_memento(self, memento: Optional[Memento]) -> None:
        """Restore a snapshot; ``None`` leaves the state untouched."""
        if memento is not None:
            self._state = memento.state


class Caretaker:
    """Keeps mementos in the order they were taken."""

    def __init__(self) -> None:
        self._mementos: List[Memento] = []

    def add_memento(self, memento: Memento) -> None:
        self._mementos.append(memento)

    def get_memento(self, index: int) -> Optional[Memento]:
        """Return the memento at ``index``, or None when out of range."""
        if 0 <= index < len(self._mementos):
            return self._mementos[index]
        return None


@demo(
    name="memento",
    category=PatternCategory.BEHAVIORAL,
    description="Capture and externalize an object's state so it can be restored later.",
)
class MementoDemo(PatternDemo):
    """Save two states, move on, then roll back to each snapshot."""

    def run(self) -> None:
        originator = Originator()
        caretaker = Caretaker()

        originator.set_state("State 1")
        caretaker.add_memento(originator.create_memento())
        originator.set_state("State 2")
        caretaker.add_memento(originator.create_memento())
        originator.set_state("State 3")
        print(f"Current state: {originator.get_state()}")

        originator.restore_memento(caretaker.get_memento(0))
        print(f"Restored to state: {originator.get_state()}")
        originator.restore_memento(caretaker.get_memento(1))
        print(f"Restored to state: {originator.get_state()}")

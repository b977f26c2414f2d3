"""
Prototype pattern.

New objects are made by cloning an existing instance instead of building
them from scratch.
"""

import copy
from abc import ABC, abstractmethod

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class Prototype(ABC):
    """Interface for objects that can clone themselves."""

    @abstractmethod
    def clone(self) -> "Prototype":
        """Return an independent copy."""

    @abstractmethod
    def show_info(self) -> None:
        """Print the object's data."""


class ConcretePrototype(Prototype):
    def __init__(self, prototype_field: int) -> None:
        self.prototype_field = prototype_field

    def clone(self) -> "ConcretePrototype":
        return copy.deepcopy(self)

    def show_info(self) -> None:
        print(f"Prototype with field: {self.prototype_field}")


@demo(
    name="prototype",
    category=PatternCategory.CREATIONAL,
    description="Create new objects by copying an existing prototype.",
)
class PrototypeDemo(PatternDemo):
    """Clone a prototype and show that the copy is a distinct object.

    The address lines come from ``id()`` and change between runs.
    """

    def run(self) -> None:
        prototype = ConcretePrototype(100)
        clone = prototype.clone()

        print("Original prototype: ", end="")
        prototype.show_info()
        print(f" Address of original prototype: {id(prototype):#x}")
        print("Cloned prototype: ", end="")
        clone.show_info()
        print(f" Address of cloned prototype: {id(clone):#x}")

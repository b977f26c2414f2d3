"""
Composite pattern.

Shapes and groups of shapes share the ``Graphic`` interface, so a whole
tree is drawn with a single call.
"""

from abc import ABC, abstractmethod
from typing import List

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class Graphic(ABC):
    """Component interface."""

    @abstractmethod
    def draw(self) -> None:
        """Draw the graphic."""


class Circle(Graphic):
    def draw(self) -> None:
        print("Drawing Circle")


class Rectangle(Graphic):
    def draw(self) -> None:
        print("Drawing Rectangle")


class CompositeGraphic(Graphic):
    """A graphic made of child graphics, which may be composites too."""

    def __init__(self) -> None:
        self._children: List[Graphic] = []

    def add(self, graphic: Graphic) -> None:
        self._children.append(graphic)

    def draw(self) -> None:
        for child in self._children:
            child.draw()

    def __len__(self) -> int:
        return len(self._children)


@demo(
    name="composite",
    category=PatternCategory.STRUCTURAL,
    description="Compose objects into trees and treat leaves and groups uniformly.",
)
class CompositeDemo(PatternDemo):
    """Draw a composite that contains another composite."""

    def run(self) -> None:
        composite1 = CompositeGraphic()
        composite1.add(Circle())
        composite1.add(Rectangle())

        composite2 = CompositeGraphic()
        composite2.add(Circle())
        composite2.add(composite1)

        composite2.draw()

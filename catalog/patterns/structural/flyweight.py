"""
Flyweight pattern.

Trees share ``TreeType`` objects for their intrinsic state (name, color,
texture) and only store their own coordinates. ``TreeFactory`` makes sure
each distinct type exists once.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from catalog.observability.logging import get_logger
from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo

logger = get_logger("patterns.flyweight")


class TreeType(ABC):
    """Flyweight interface; position is passed in as extrinsic state."""

    @abstractmethod
    def draw(self, x: int, y: int) -> None:
        """Draw a tree of this type at ``(x, y)``."""


class ConcreteTreeType(TreeType):
    def __init__(self, name: str, color: str, texture: str) -> None:
        self.name = name
        self.color = color
        self.texture = texture

    def draw(self, x: int, y: int) -> None:
        print(
            f"Drawing tree {self.name} of color {self.color} "
            f"with texture {self.texture} at ({x}, {y})"
        )


class TreeFactory:
    """Cache of tree types keyed by ``name_color_texture``."""

    def __init__(self) -> None:
        self._tree_types: Dict[str, TreeType] = {}

    def get_tree_type(self, name: str, color: str, texture: str) -> TreeType:
        key = f"{name}_{color}_{texture}"
        if key not in self._tree_types:
            logger.debug(f"Creating tree type {key}")
            self._tree_types[key] = ConcreteTreeType(name, color, texture)
        return self._tree_types[key]

    def __len__(self) -> int:
        return len(self._tree_types)


class Tree:
    """A single tree: coordinates plus a shared type."""

    def __init__(self, x: int, y: int, tree_type: TreeType) -> None:
        self.x = x
        self.y = y
        self.tree_type = tree_type

    def draw(self) -> None:
        self.tree_type.draw(self.x, self.y)


@demo(
    name="flyweight",
    category=PatternCategory.STRUCTURAL,
    description="Share common state between many fine-grained objects.",
)
class FlyweightDemo(PatternDemo):
    """Plant five trees that share three tree types."""

    def run(self) -> None:
        factory = TreeFactory()
        forest: List[Tree] = [
            Tree(1, 2, factory.get_tree_type("Oak", "Green", "Rough")),
            Tree(3, 4, factory.get_tree_type("Pine", "Dark Green", "Smooth")),
            Tree(5, 6, factory.get_tree_type("Oak", "Green", "Rough")),
            Tree(7, 8, factory.get_tree_type("Pine", "Dark Green", "Smooth")),
            Tree(9, 10, factory.get_tree_type("Birch", "White", "Smooth")),
        ]

        for tree in forest:
            tree.draw()

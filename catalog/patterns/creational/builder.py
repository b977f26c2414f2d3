"""
Builder pattern.

A director runs the same construction steps against different builders,
each of which assembles its own representation of the product.
"""

from abc import ABC, abstractmethod
from typing import Optional

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class Product:
    """The object under construction: a space-separated list of parts."""

    def __init__(self) -> None:
        self._parts = ""

    def add_part(self, part: str) -> None:
        self._parts += part + " "

    @property
    def parts(self) -> str:
        return self._parts

    def show_product(self) -> None:
        print(f"Product parts: {self._parts}")


class Builder(ABC):
    """Interface for building the parts of a product."""

    @abstractmethod
    def build_part_a(self) -> None:
        """Add part A."""

    @abstractmethod
    def build_part_b(self) -> None:
        """Add part B."""

    @abstractmethod
    def build_part_c(self) -> None:
        """Add part C."""

    @abstractmethod
    def get_product(self) -> Product:
        """Return the product built so far."""


class SuffixBuilder(Builder):
    """Builder whose parts are tagged with a fixed suffix."""

    suffix = ""

    def __init__(self) -> None:
        self._product = Product()

    def build_part_a(self) -> None:
        self._product.add_part(f"PartA{self.suffix}")

    def build_part_b(self) -> None:
        self._product.add_part(f"PartB{self.suffix}")

    def build_part_c(self) -> None:
        self._product.add_part(f"PartC{self.suffix}")

    def get_product(self) -> Product:
        return self._product


class ConcreteBuilder1(SuffixBuilder):
    suffix = "1"


class ConcreteBuilder2(SuffixBuilder):
    suffix = "2"


class Director:
    """Drives a builder through the construction steps in a fixed order."""

    def __init__(self) -> None:
        self._builder: Optional[Builder] = None

    def set_builder(self, builder: Builder) -> None:
        self._builder = builder

    def construct(self) -> None:
        """Build parts A, B and C; does nothing without a builder."""
        if self._builder is None:
            return
        self._builder.build_part_a()
        self._builder.build_part_b()
        self._builder.build_part_c()

    def get_product(self) -> Optional[Product]:
        return self._builder.get_product() if self._builder else None


@demo(
    name="builder",
    category=PatternCategory.CREATIONAL,
    description="Separate the construction of a complex object from its representation.",
)
class BuilderDemo(PatternDemo):
    """Construct one product with each builder."""

    def run(self) -> None:
        director = Director()
        for builder in (ConcreteBuilder1(), ConcreteBuilder2()):
            director.set_builder(builder)
            director.construct()
            product = director.get_product()
            if product is not None:
                product.show_product()

"""
Abstract Factory pattern.

Each concrete factory produces a whole family of related products, so
products from the same factory are guaranteed to work together.
"""

from abc import ABC, abstractmethod

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class ProductTypeA(ABC):
    """First product kind of every family."""

    @abstractmethod
    def perform_action(self) -> None:
        """Print what the product does."""


class ProductTypeB(ABC):
    """Second product kind; collaborates with a type A product."""

    @abstractmethod
    def perform_action(self) -> None:
        """Print what the product does."""

    @abstractmethod
    def collaborate(self, collaborator: ProductTypeA) -> None:
        """Work together with a product of type A."""


class ConcreteProductA1(ProductTypeA):
    def perform_action(self) -> None:
        print("Performing action of Product A1.")


class ConcreteProductA2(ProductTypeA):
    def perform_action(self) -> None:
        print("Performing action of Product A2.")


class ConcreteProductB1(ProductTypeB):
    def perform_action(self) -> None:
        print("Performing action of Product B1.")

    def collaborate(self, collaborator: ProductTypeA) -> None:
        print("Product B1 collaborating with (", end="")
        collaborator.perform_action()
        print(")")


class ConcreteProductB2(ProductTypeB):
    def perform_action(self) -> None:
        print("Performing action of Product B2.")

    def collaborate(self, collaborator: ProductTypeA) -> None:
        print("Product B2 collaborating with (", end="")
        collaborator.perform_action()
        print(")")


class AbstractFactory(ABC):
    """Interface for creating one product of each kind."""

    @abstractmethod
    def create_product_a(self) -> ProductTypeA:
        """Create the family's type A product."""

    @abstractmethod
    def create_product_b(self) -> ProductTypeB:
        """Create the family's type B product."""


class ConcreteFactory1(AbstractFactory):
    def create_product_a(self) -> ProductTypeA:
        return ConcreteProductA1()

    def create_product_b(self) -> ProductTypeB:
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    def create_product_a(self) -> ProductTypeA:
        return ConcreteProductA2()

    def create_product_b(self) -> ProductTypeB:
        return ConcreteProductB2()


@demo(
    name="abstract_factory",
    category=PatternCategory.CREATIONAL,
    description="Create families of related objects without naming their classes.",
)
class AbstractFactoryDemo(PatternDemo):
    """Let each factory's B product collaborate with its own A product."""

    def run(self) -> None:
        factory: AbstractFactory
        for factory in (ConcreteFactory1(), ConcreteFactory2()):
            product_a = factory.create_product_a()
            product_b = factory.create_product_b()
            product_b.collaborate(product_a)

"""
Decorator pattern.

Condiments wrap a beverage and add to its description and cost, and can
be stacked in any order.
"""

from abc import ABC, abstractmethod

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class Beverage(ABC):
    """Component interface."""

    @abstractmethod
    def get_description(self) -> str:
        """Return the drink's description."""

    @abstractmethod
    def cost(self) -> int:
        """Return the price in rupees."""


class Espresso(Beverage):
    def get_description(self) -> str:
        return "Espresso"

    def cost(self) -> int:
        return 10


class CondimentDecorator(Beverage):
    """Base decorator: wraps a beverage and extends it by one condiment."""

    name = ""
    price = 0

    def __init__(self, beverage: Beverage) -> None:
        self._beverage = beverage

    def get_description(self) -> str:
        return f"{self._beverage.get_description()}, {self.name}"

    def cost(self) -> int:
        return self.price + self._beverage.cost()


class Milk(CondimentDecorator):
    name = "Milk"
    price = 15


class Mocha(CondimentDecorator):
    name = "Mocha"
    price = 30


def describe(beverage: Beverage) -> str:
    return f"{beverage.get_description()} Rs.{beverage.cost()}"


@demo(
    name="decorator",
    category=PatternCategory.STRUCTURAL,
    description="Attach responsibilities to an object dynamically by wrapping it.",
)
class DecoratorDemo(PatternDemo):
    """Decorate an espresso with milk, then mocha."""

    def run(self) -> None:
        beverage: Beverage = Espresso()
        print(describe(beverage))

        beverage = Milk(beverage)
        print(describe(beverage))

        beverage = Mocha(beverage)
        print(describe(beverage))

"""
Strategy pattern.

Interchangeable arithmetic algorithms behind one interface, swapped on a
context at runtime.
"""

from abc import ABC, abstractmethod
from typing import Optional

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class Strategy(ABC):
    """Interface for a binary operation on integers."""

    @abstractmethod
    def execute(self, a: int, b: int) -> None:
        """Apply the operation and print the result."""


class ConcreteStrategyAdd(Strategy):
    def execute(self, a: int, b: int) -> None:
        print(f"Result of addition: {a + b}")


class ConcreteStrategySubtract(Strategy):
    def execute(self, a: int, b: int) -> None:
        print(f"Result of subtraction: {a - b}")


class ConcreteStrategyMultiply(Strategy):
    def execute(self, a: int, b: int) -> None:
        print(f"Result of multiplication: {a * b}")


class Context:
    """Holds the strategy in use and delegates to it."""

    def __init__(self, strategy: Optional[Strategy] = None) -> None:
        self._strategy = strategy

    def set_strategy(self, strategy: Optional[Strategy]) -> None:
        self._strategy = strategy

    def execute_strategy(self, a: int, b: int) -> None:
        """Run the current strategy; does nothing when none is set."""
        if self._strategy is not None:
            self._strategy.execute(a, b)


@demo(
    name="strategy",
    category=PatternCategory.BEHAVIORAL,
    description="Make a family of algorithms interchangeable at runtime.",
)
class StrategyDemo(PatternDemo):
    """Apply add, subtract and multiply to 5 and 3."""

    def run(self) -> None:
        context = Context(ConcreteStrategyAdd())
        context.execute_strategy(5, 3)
        context.set_strategy(ConcreteStrategySubtract())
        context.execute_strategy(5, 3)
        context.set_strategy(ConcreteStrategyMultiply())
        context.execute_strategy(5, 3)

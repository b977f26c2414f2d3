"""
Template Method pattern.

The base class fixes the order of an algorithm's steps; subclasses only
fill in the steps themselves.
"""

from abc import ABC, abstractmethod
from typing import Any, NoReturn

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class AbstractClass(ABC):
    """Skeleton algorithm with two primitive operations."""

    def template_method(self) -> None:
        self.primitive_operation1()
        self.primitive_operation2()

    @abstractmethod
    def primitive_operation1(self) -> None:
        """First step."""

    @abstractmethod
    def primitive_operation2(self) -> None:
        """Second step."""

    def __copy__(self) -> NoReturn:
        raise TypeError(f"{type(self).__name__} instances cannot be copied")

    def __deepcopy__(self, memo: Any) -> NoReturn:
        raise TypeError(f"{type(self).__name__} instances cannot be copied")


class ConcreteClassA(AbstractClass):
    def primitive_operation1(self) -> None:
        print("ConcreteClassA: Primitive Operation 1")

    def primitive_operation2(self) -> None:
        print("ConcreteClassA: Primitive Operation 2")


class ConcreteClassB(AbstractClass):
    def primitive_operation1(self) -> None:
        print("ConcreteClassB: Primitive Operation 1")

    def primitive_operation2(self) -> None:
        print("ConcreteClassB: Primitive Operation 2")


@demo(
    name="template_method",
    category=PatternCategory.BEHAVIORAL,
    description="Define an algorithm's skeleton and let subclasses supply the steps.",
)
class TemplateMethodDemo(PatternDemo):
    """Run the same template with two concrete classes."""

    def run(self) -> None:
        print("Using ConcreteClassA:")
        ConcreteClassA().template_method()
        print("\nUsing ConcreteClassB:")
        ConcreteClassB().template_method()

"""
Visitor pattern.

New operations over an element structure live in visitor classes; each
element's ``accept`` dispatches to the visitor method for its own type.
"""

from abc import ABC, abstractmethod
from typing import List

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class Visitor(ABC):
    """Interface with one visit method per concrete element type."""

    @abstractmethod
    def visit_element_a(self, element: "ElementA") -> None:
        """Visit an ElementA."""

    @abstractmethod
    def visit_element_b(self, element: "ElementB") -> None:
        """Visit an ElementB."""


class Element(ABC):
    """Interface for elements that accept visitors."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        """Dispatch to the matching visit method."""


class ElementA(Element):
    def accept(self, visitor: Visitor) -> None:
        visitor.visit_element_a(self)

    def operation_a(self) -> None:
        print("ElementA operation")


class ElementB(Element):
    def accept(self, visitor: Visitor) -> None:
        visitor.visit_element_b(self)

    def operation_b(self) -> None:
        print("ElementB operation")


class ConcreteVisitor(Visitor):
    """Announces each visit, then calls the element's own operation."""

    def visit_element_a(self, element: ElementA) -> None:
        print("Visiting ElementA")
        element.operation_a()

    def visit_element_b(self, element: ElementB) -> None:
        print("Visiting ElementB")
        element.operation_b()


@demo(
    name="visitor",
    category=PatternCategory.BEHAVIORAL,
    description="Add operations to an object structure without modifying its classes.",
)
class VisitorDemo(PatternDemo):
    """Visit one element of each type."""

    def run(self) -> None:
        elements: List[Element] = [ElementA(), ElementB()]
        visitor = ConcreteVisitor()
        for element in elements:
            element.accept(visitor)

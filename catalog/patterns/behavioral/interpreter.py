"""
Interpreter pattern.

A tiny grammar of boolean expressions: variables (terminals) combined
with OR and AND (non-terminals), evaluated against a context of values.
"""

from abc import ABC, abstractmethod
from typing import Dict

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class Context:
    """Variable bindings an expression is evaluated against."""

    def __init__(self) -> None:
        self._variables: Dict[str, bool] = {}

    def get_variable(self, name: str) -> bool:
        """Look up a variable; unknown names are bound to False on first read."""
        return self._variables.setdefault(name, False)

    def set_variable(self, name: str, value: bool) -> None:
        self._variables[name] = value


class Expression(ABC):
    """Interface for nodes of the expression tree."""

    @abstractmethod
    def interpret(self, context: Context) -> bool:
        """Evaluate the expression."""

    @abstractmethod
    def clone(self) -> "Expression":
        """Return a deep copy of the expression tree."""


class TerminalExpression(Expression):
    """A variable reference."""

    def __init__(self, variable: str) -> None:
        self.variable = variable

    def interpret(self, context: Context) -> bool:
        return context.get_variable(self.variable)

    def clone(self) -> "TerminalExpression":
        return TerminalExpression(self.variable)


class OrExpression(Expression):
    """Logical OR of two sub-expressions."""

    def __init__(self, expr1: Expression, expr2: Expression) -> None:
        self.expr1 = expr1
        self.expr2 = expr2

    def interpret(self, context: Context) -> bool:
        return self.expr1.interpret(context) or self.expr2.interpret(context)

    def clone(self) -> "OrExpression":
        return OrExpression(self.expr1.clone(), self.expr2.clone())


class AndExpression(Expression):
    """Logical AND of two sub-expressions."""

    def __init__(self, expr1: Expression, expr2: Expression) -> None:
        self.expr1 = expr1
        self.expr2 = expr2

    def interpret(self, context: Context) -> bool:
        return self.expr1.interpret(context) and self.expr2.interpret(context)

    def clone(self) -> "AndExpression":
        return AndExpression(self.expr1.clone(), self.expr2.clone())


@demo(
    name="interpreter",
    category=PatternCategory.BEHAVIORAL,
    description="Define a grammar and an interpreter that evaluates sentences in it.",
)
class InterpreterDemo(PatternDemo):
    """Evaluate ``A OR B`` and ``A AND B`` with A true and B false."""

    def run(self) -> None:
        context = Context()
        context.set_variable("A", True)
        context.set_variable("B", False)

        a = TerminalExpression("A")
        b = TerminalExpression("B")
        either = OrExpression(a.clone(), b.clone())
        both = AndExpression(a.clone(), b.clone())

        # booleans are shown as 1/0
        print(f"A OR B is {int(either.interpret(context))}")
        print(f"A AND B is {int(both.interpret(context))}")

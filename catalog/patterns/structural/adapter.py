"""
Adapter pattern.

Wraps a class with an incompatible interface so it can be used wherever
the client expects a ``Target``.
"""

from abc import ABC, abstractmethod

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class Target(ABC):
    """The interface the client works with."""

    @abstractmethod
    def request(self) -> str:
        """Return the response text."""


class Adaptee:
    """Useful class with an interface the client does not understand."""

    def specific_request(self) -> str:
        return "Adaptee's specific request"


class Adapter(Target):
    """Translates ``request`` into a call on the wrapped adaptee."""

    def __init__(self, adaptee: Adaptee) -> None:
        self._adaptee = adaptee

    def request(self) -> str:
        return f"Adapter: (TRANSLATED) {self._adaptee.specific_request()}"


def client_code(target: Target) -> None:
    """Client that only knows about ``Target``."""
    print(target.request())


@demo(
    name="adapter",
    category=PatternCategory.STRUCTURAL,
    description="Convert one interface into another that clients expect.",
)
class AdapterDemo(PatternDemo):
    """Hand an adapted adaptee to target-only client code."""

    def run(self) -> None:
        adapter = Adapter(Adaptee())
        print("Client: I can work just fine with the Target objects:")
        client_code(adapter)

"""
Mediator pattern.

Colleagues never talk to each other directly; every message goes through
the mediator, which decides who receives it.
"""

from abc import ABC, abstractmethod
from typing import Optional

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class Mediator(ABC):
    """Interface for routing messages between colleagues."""

    @abstractmethod
    def send_message(self, colleague: "Colleague", message: str) -> None:
        """Deliver a message sent by ``colleague``."""


class Colleague(ABC):
    """A participant that communicates only through its mediator."""

    def __init__(self, mediator: Mediator) -> None:
        self.mediator = mediator

    def send(self, message: str) -> None:
        self.mediator.send_message(self, message)

    @abstractmethod
    def receive(self, message: str) -> None:
        """Handle a message routed by the mediator."""


class ConcreteMediator(Mediator):
    """Routes messages between exactly two colleagues."""

    def __init__(self) -> None:
        self.colleague1: Optional[Colleague] = None
        self.colleague2: Optional[Colleague] = None

    def set_colleague1(self, colleague: Colleague) -> None:
        self.colleague1 = colleague

    def set_colleague2(self, colleague: Colleague) -> None:
        self.colleague2 = colleague

    def send_message(self, colleague: Colleague, message: str) -> None:
        receiver = self.colleague2 if colleague is self.colleague1 else self.colleague1
        if receiver is not None:
            receiver.receive(message)


class ConcreteColleague1(Colleague):
    def receive(self, message: str) -> None:
        print(f"Concrete Colleague 1 received: {message}")


class ConcreteColleague2(Colleague):
    def receive(self, message: str) -> None:
        print(f"Concrete Colleague 2 received: {message}")


@demo(
    name="mediator",
    category=PatternCategory.BEHAVIORAL,
    description="Centralize communication between objects in a mediator.",
)
class MediatorDemo(PatternDemo):
    """Two colleagues greet each other through a mediator."""

    def run(self) -> None:
        mediator = ConcreteMediator()
        colleague1 = ConcreteColleague1(mediator)
        colleague2 = ConcreteColleague2(mediator)
        mediator.set_colleague1(colleague1)
        mediator.set_colleague2(colleague2)

        colleague1.send("Hello, colleague2!")
        colleague2.send("Hello, colleague1!")

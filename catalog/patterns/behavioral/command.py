"""
Command pattern.

Requests are wrapped in objects so an invoker can queue and run them
without knowing what they do.
"""

from abc import ABC, abstractmethod
from typing import List

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class Command(ABC):
    """Interface for an executable request."""

    @abstractmethod
    def execute(self) -> None:
        """Perform the request."""


class Receiver:
    """Knows how to carry out the actual work."""

    def perform_action(self) -> None:
        print("Receiver is performing action.")


class ConcreteCommand(Command):
    """Binds a receiver to the action it should perform."""

    def __init__(self, receiver: Receiver) -> None:
        self._receiver = receiver

    def execute(self) -> None:
        self._receiver.perform_action()


class Invoker:
    """Queues commands and executes them in order."""

    def __init__(self) -> None:
        self._commands: List[Command] = []

    def add_command(self, command: Command) -> None:
        """Append a command to the queue."""
        self._commands.append(command)

    def execute_commands(self) -> None:
        """Run every queued command, then empty the queue."""
        for command in self._commands:
            command.execute()
        self._commands.clear()

    def __len__(self) -> int:
        return len(self._commands)


@demo(
    name="command",
    category=PatternCategory.BEHAVIORAL,
    description="Encapsulate a request as an object that can be queued and executed.",
)
class CommandDemo(PatternDemo):
    """Queue one command on an invoker and execute it."""

    def run(self) -> None:
        invoker = Invoker()
        invoker.add_command(ConcreteCommand(Receiver()))
        invoker.execute_commands()

"""
Chain of Responsibility pattern.

A request travels along a chain of handlers until one of them accepts it
or the chain runs out. Each concrete handler here owns a range of integers.
"""

from abc import ABC, abstractmethod
from typing import Optional

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class Handler(ABC):
    """Interface for a link in the chain."""

    @abstractmethod
    def handle_request(self, request: int) -> None:
        """Handle the request or pass it on."""

    @abstractmethod
    def set_next_handler(self, next_handler: Optional["Handler"]) -> None:
        """Set the handler that receives requests this one rejects."""


class RangeHandler(Handler):
    """Handler accepting requests in ``[low, high)``."""

    low = 0
    high = 0

    def __init__(self) -> None:
        self._next_handler: Optional[Handler] = None

    def set_next_handler(self, next_handler: Optional[Handler]) -> None:
        self._next_handler = next_handler

    def handle_request(self, request: int) -> None:
        if self.low <= request < self.high:
            print(f"Request {request} handled by {type(self).__name__}.")
        elif self._next_handler is not None:
            self._next_handler.handle_request(request)
        else:
            print(f"Request {request} can't be handled.")


class ConcreteHandler1(RangeHandler):
    """Handles requests from 0 to 9."""

    low = 0
    high = 10


class ConcreteHandler2(RangeHandler):
    """Handles requests from 10 to 19."""

    low = 10
    high = 20


@demo(
    name="chain_of_responsibility",
    category=PatternCategory.BEHAVIORAL,
    description="Pass a request along a chain of handlers until one handles it.",
)
class ChainOfResponsibilityDemo(PatternDemo):
    """Two range handlers chained together, fed three requests."""

    def run(self) -> None:
        handler1 = ConcreteHandler1()
        handler1.set_next_handler(ConcreteHandler2())

        for request in (5, 12, 25):
            handler1.handle_request(request)

"""
Base class for pattern demos.
"""

from abc import ABC, abstractmethod


class PatternDemo(ABC):
    """Abstract base class for pattern demos.

    A demo builds the objects of one pattern example and drives them,
    printing the illustrative output to stdout.
    """

    # pylint: disable=too-few-public-methods

    @abstractmethod
    def run(self) -> None:
        """Run the example."""

"""
Design pattern examples.

Each module below ``behavioral``, ``creational`` and ``structural`` is a
standalone example of one pattern, registered with the ``@demo`` decorator.
"""

from catalog.patterns.base import PatternDemo

__all__ = ["PatternDemo"]

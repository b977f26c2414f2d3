"""
Iterator pattern.

Walk a collection element by element without exposing how it is stored.
The explicit ``has_next``/``next`` interface is the classical shape; the
aggregate also plugs into Python's own iteration protocol.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterator as PyIterator, List, Sequence, TypeVar

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo

T = TypeVar("T")


class Iterator(ABC, Generic[T]):
    """Interface for sequential access to a collection."""

    @abstractmethod
    def has_next(self) -> bool:
        """Return True while elements remain."""

    @abstractmethod
    def next(self) -> T:
        """Return the current element and advance."""


class ConcreteIterator(Iterator[T]):
    """Iterator over a sequence, tracking the current position."""

    def __init__(self, collection: Sequence[T]) -> None:
        self._collection = collection
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._collection)

    def next(self) -> T:
        if not self.has_next():
            raise StopIteration
        item = self._collection[self._position]
        self._position += 1
        return item


class Aggregate(ABC, Generic[T]):
    """Interface for collections that hand out iterators."""

    @abstractmethod
    def create_iterator(self) -> Iterator[T]:
        """Create a fresh iterator positioned at the first element."""


class ConcreteAggregate(Aggregate[T]):
    """A list-backed collection."""

    def __init__(self) -> None:
        self._collection: List[T] = []

    def add(self, item: T) -> None:
        self._collection.append(item)

    def create_iterator(self) -> ConcreteIterator[T]:
        return ConcreteIterator(self._collection)

    def __iter__(self) -> PyIterator[T]:
        iterator = self.create_iterator()
        while iterator.has_next():
            yield iterator.next()

    def __len__(self) -> int:
        return len(self._collection)


@demo(
    name="iterator",
    category=PatternCategory.BEHAVIORAL,
    description="Access the elements of a collection without exposing its representation.",
)
class IteratorDemo(PatternDemo):
    """Iterate over the integers 1, 2, 3."""

    def run(self) -> None:
        aggregate: ConcreteAggregate[int] = ConcreteAggregate()
        for value in (1, 2, 3):
            aggregate.add(value)

        iterator = aggregate.create_iterator()
        while iterator.has_next():
            print(iterator.next(), end=" ")
        print()

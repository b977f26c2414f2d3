"""
Observer pattern.

A subject keeps a list of observers and notifies all of them whenever its
message changes. The registry is guarded by a lock so attach, detach and
notify stay consistent if several threads share one subject.
"""

import threading
from abc import ABC, abstractmethod
from typing import List

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class Observer(ABC):
    """Interface for objects interested in a subject's updates."""

    @abstractmethod
    def update(self, message: str) -> None:
        """Receive the subject's current message."""


class Subject(ABC):
    """Interface for objects that publish updates to observers."""

    @abstractmethod
    def attach(self, observer: Observer) -> None:
        """Start notifying ``observer``."""

    @abstractmethod
    def detach(self, observer: Observer) -> None:
        """Stop notifying ``observer``."""

    @abstractmethod
    def notify(self) -> None:
        """Push the current message to every observer."""


class ConcreteSubject(Subject):
    """Subject holding a single message string."""

    def __init__(self) -> None:
        self._observers: List[Observer] = []
        self._message = ""
        self._lock = threading.Lock()

    def attach(self, observer: Observer) -> None:
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    def notify(self) -> None:
        # update() runs outside the lock so observers may attach or detach
        with self._lock:
            observers = list(self._observers)
            message = self._message
        for observer in observers:
            observer.update(message)

    def set_message(self, message: str) -> None:
        """Store a new message and notify observers."""
        with self._lock:
            self._message = message
        self.notify()

    @property
    def observer_count(self) -> int:
        with self._lock:
            return len(self._observers)


class ConcreteObserver(Observer):
    """Observer that prints what it receives."""

    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, message: str) -> None:
        print(f"{self.name} received message: {message}")


@demo(
    name="observer",
    category=PatternCategory.BEHAVIORAL,
    description="Notify dependents automatically when an object's state changes.",
)
class ObserverDemo(PatternDemo):
    """Two observers, one of which unsubscribes between messages."""

    def run(self) -> None:
        subject = ConcreteSubject()
        observer1 = ConcreteObserver("Observer 1")
        observer2 = ConcreteObserver("Observer 2")

        subject.attach(observer1)
        subject.attach(observer2)
        subject.set_message("Hello observers!")

        subject.detach(observer2)
        subject.set_message("Hello again!")

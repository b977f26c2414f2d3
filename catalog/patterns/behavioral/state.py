"""
State pattern.

A machine delegates ``handle_request`` to its current state object, so its
behaviour changes with the state and no conditionals are needed.
"""

from abc import ABC, abstractmethod

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class State(ABC):
    """Interface for the machine's states."""

    @abstractmethod
    def handle_request(self, machine: "Machine") -> None:
        """React to a request while the machine is in this state."""


class OnState(State):
    def handle_request(self, machine: "Machine") -> None:
        print("Machine is ON now.")


class OffState(State):
    def handle_request(self, machine: "Machine") -> None:
        print("Machine is OFF now.")


class StandbyState(State):
    def handle_request(self, machine: "Machine") -> None:
        print("Machine is in Standby mode.")


class Machine:
    """Context owning one instance of each state; starts switched off."""

    def __init__(self) -> None:
        self._on_state = OnState()
        self._off_state = OffState()
        self._standby_state = StandbyState()
        self._current_state: State = self._off_state

    def set_state(self, state: State) -> None:
        self._current_state = state

    def handle_request(self) -> None:
        self._current_state.handle_request(self)

    @property
    def current_state(self) -> State:
        return self._current_state

    @property
    def on_state(self) -> State:
        return self._on_state

    @property
    def off_state(self) -> State:
        return self._off_state

    @property
    def standby_state(self) -> State:
        return self._standby_state


@demo(
    name="state",
    category=PatternCategory.BEHAVIORAL,
    description="Let an object change its behaviour when its internal state changes.",
)
class StateDemo(PatternDemo):
    """Cycle a machine through off, on and standby."""

    def run(self) -> None:
        machine = Machine()
        machine.handle_request()
        machine.set_state(machine.on_state)
        machine.handle_request()
        machine.set_state(machine.standby_state)
        machine.handle_request()

"""
Bridge pattern.

Remote controls (the abstraction) and devices (the implementation) vary
independently: any remote can drive any device.
"""

from abc import ABC, abstractmethod

from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo


class Device(ABC):
    """Implementor interface."""

    @abstractmethod
    def turn_on(self) -> None:
        """Switch the device on."""

    @abstractmethod
    def turn_off(self) -> None:
        """Switch the device off."""

    @abstractmethod
    def set_volume(self, volume: int) -> None:
        """Change the volume."""


class NamedDevice(Device):
    """Device that reports each operation under its display name."""

    label = ""

    def turn_on(self) -> None:
        print(f"Turning on the {self.label}.")

    def turn_off(self) -> None:
        print(f"Turning off the {self.label}.")

    def set_volume(self, volume: int) -> None:
        print(f"Setting {self.label} volume to {volume}.")


class TV(NamedDevice):
    label = "TV"


class Radio(NamedDevice):
    label = "Radio"


class RemoteControl:
    """Abstraction holding a reference to some device."""

    def __init__(self, device: Device) -> None:
        self.device = device

    def turn_on(self) -> None:
        self.device.turn_on()

    def turn_off(self) -> None:
        self.device.turn_off()


class BasicRemote(RemoteControl):
    def turn_on(self) -> None:
        print("Basic Remote: ", end="")
        self.device.turn_on()

    def turn_off(self) -> None:
        print("Basic Remote: ", end="")
        self.device.turn_off()


class AdvancedRemote(RemoteControl):
    """Remote that can also change the volume."""

    def turn_on(self) -> None:
        print("Advanced Remote: ", end="")
        self.device.turn_on()

    def turn_off(self) -> None:
        print("Advanced Remote: ", end="")
        self.device.turn_off()

    def set_volume(self, volume: int) -> None:
        print("Advanced Remote: ", end="")
        self.device.set_volume(volume)


@demo(
    name="bridge",
    category=PatternCategory.STRUCTURAL,
    description="Decouple an abstraction from its implementation so both can vary.",
)
class BridgeDemo(PatternDemo):
    """A basic remote drives a TV, an advanced remote drives a radio."""

    def run(self) -> None:
        basic_remote = BasicRemote(TV())
        advanced_remote = AdvancedRemote(Radio())

        basic_remote.turn_on()
        basic_remote.turn_off()
        advanced_remote.turn_on()
        advanced_remote.turn_off()
        advanced_remote.set_volume(10)

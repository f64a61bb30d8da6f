"""Buttons that trigger device commands."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Command(ABC):
    @abstractmethod
    def execute(self) -> str:
        """Carry out the command and describe what happened."""


class Device(ABC):
    @abstractmethod
    def on(self) -> str:
        """Switch the device on."""

    @abstractmethod
    def off(self) -> str:
        """Switch the device off."""


class Button:
    """Runs its command when pressed."""

    def __init__(self, command: Command) -> None:
        self.command = command

    def press(self) -> str:
        return self.command.execute()


class OnCommand(Command):
    def __init__(self, device: Device) -> None:
        self.device = device

    def execute(self) -> str:
        return self.device.on()


class OffCommand(Command):
    def __init__(self, device: Device) -> None:
        self.device = device

    def execute(self) -> str:
        return self.device.off()


class TV(Device):
    def __init__(self) -> None:
        self.is_on = False

    def on(self) -> str:
        self.is_on = True
        return "TV on"

    def off(self) -> str:
        self.is_on = False
        return "TV off"


def main(argv: list[str] | None = None) -> int:
    """Press an on button and then an off button for a TV."""
    tv = TV()
    print(Button(OnCommand(tv)).press())
    print(Button(OffCommand(tv)).press())
    return 0
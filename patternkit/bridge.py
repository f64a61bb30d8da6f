"""Computers and printers that vary independently, joined by a bridge."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Printer(ABC):
    """The implementation side of the bridge."""

    @abstractmethod
    def print_action(self) -> str:
        """Return a description of the print job."""


class Epson(Printer):
    def print_action(self) -> str:
        return "Print by Epson"


class HP(Printer):
    def print_action(self) -> str:
        return "Print by HP"


class Computer(ABC):
    """The abstraction side of the bridge; holds a printer."""

    label: str = ""

    def __init__(self, printer: Printer | None = None) -> None:
        self.printer = printer

    def set_printer(self, printer: Printer) -> None:
        self.printer = printer

    def print(self) -> str:
        """Print through the attached printer and describe it."""
        if self.printer is None:
            raise RuntimeError("no printer attached")
        return f"{self.label} {self.printer.print_action()}"


class Win(Computer):
    label = "Win"


class Mac(Computer):
    label = "Mac"


def main(argv: list[str] | None = None) -> int:
    """Print from a Mac to an HP printer."""
    mac = Mac()
    mac.set_printer(HP())
    print(mac.print())
    return 0
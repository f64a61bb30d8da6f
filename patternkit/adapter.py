"""An adapter exposing a colour-keyed interface over a colour-specific one."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class Color(Enum):
    RED = "red"
    BLUE = "blue"
    YELLOW = "yellow"
    GREEN = "green"


class Remote:
    """An existing interface with one method per colour."""

    def contract_red(self, text: str) -> str:
        return f"R: {text}"

    def contract_blue(self, text: str) -> str:
        return f"B: {text}"

    def contract_yellow(self, text: str) -> str:
        return f"Y: {text}"

    def contract_green(self, text: str) -> str:
        return f"G: {text}"


class Local(ABC):
    """The interface clients expect."""

    @abstractmethod
    def messages(self, color: Color, text: str) -> str:
        """Format a message for the given colour."""


class Adapter(Remote, Local):
    """Routes colour-keyed messages to the matching remote method."""

    def messages(self, color: Color, text: str) -> str:
        if color is Color.RED:
            return self.contract_red(text)
        if color is Color.BLUE:
            return self.contract_blue(text)
        if color is Color.YELLOW:
            return self.contract_yellow(text)
        return self.contract_green(text)


def main(argv: list[str] | None = None) -> int:
    """Send a greeting in each colour."""
    display: Local = Adapter()
    print(display.messages(Color.RED, "Hello, I am Red"))
    print(display.messages(Color.BLUE, "Hello, I am Blue"))
    print(display.messages(Color.YELLOW, "Hello, I am Yellow"))
    print(display.messages(Color.GREEN, "Hello, I am Green"))
    return 0
"""A switch whose behaviour depends on its current state."""

from __future__ import annotations

from abc import ABC, abstractmethod


class State(ABC):
    @abstractmethod
    def on(self, switch: Switch) -> str:
        """Handle an 'on' request."""

    @abstractmethod
    def off(self, switch: Switch) -> str:
        """Handle an 'off' request."""


class OnState(State):
    def on(self, switch: Switch) -> str:
        return "Switch already On"

    def off(self, switch: Switch) -> str:
        switch.state = OffState()
        return "Switch return from On to Off"


class OffState(State):
    def on(self, switch: Switch) -> str:
        switch.state = OnState()
        return "Switch return from Off to On"

    def off(self, switch: Switch) -> str:
        return "Switch already Off"


class Switch:
    def __init__(self, state: State) -> None:
        self.state = state

    def on(self) -> str:
        return self.state.on(self)

    def off(self) -> str:
        return self.state.off(self)


def main(argv: list[str] | None = None) -> int:
    """Turn an already-on switch on, then off."""
    switch = Switch(OnState())
    print(switch.on())
    print(switch.off())
    return 0
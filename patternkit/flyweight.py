"""Shared soldier objects keyed by uniform colour."""

from __future__ import annotations


class Soldier:
    """Holds the shared colour; per-soldier data is passed in on display."""

    def __init__(self, color: str) -> None:
        self.color = color

    def display(self, soldier_id: str, star: int, weight: int, height: int) -> str:
        return (
            f"Display this soldier wear {self.color} with id: {soldier_id}, "
            f"{star} star(s), with weight {weight} and height {height}"
        )


class SoldierFactory:
    """Hands out one shared Soldier per colour."""

    def __init__(self) -> None:
        self._soldiers: dict[str, Soldier] = {}

    def get_soldier(self, color: str) -> Soldier:
        if color not in self._soldiers:
            self._soldiers[color] = Soldier(color)
        return self._soldiers[color]


def main(argv: list[str] | None = None) -> int:
    """Display three soldiers sharing two colour objects."""
    factory = SoldierFactory()
    print(factory.get_soldier("red").display("MTX 65", 20, 30, 40))
    print(factory.get_soldier("blue").display("MMX 70", 60, 70, 80))
    print(factory.get_soldier("red").display("MTX 70", 25, 35, 45))
    return 0
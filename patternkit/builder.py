"""Building houses step by step under a director."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class House:
    shoe: str = ""
    door: str = ""
    floor: int = 0

    def describe(self) -> str:
        return f"Shoe:{self.shoe}\nDoor:{self.door}\nFloor:{self.floor}"


class HouseBuilder(ABC):
    """Builds the parts of one house at a time."""

    def __init__(self) -> None:
        self.house: House | None = None

    def create(self) -> None:
        """Start a fresh house."""
        self.house = House()

    def _current(self) -> House:
        if self.house is None:
            raise RuntimeError("create() must be called before building parts")
        return self.house

    @abstractmethod
    def build_shoe(self) -> None: ...

    @abstractmethod
    def build_door(self) -> None: ...

    @abstractmethod
    def build_floor(self) -> None: ...


class WoodHouseBuilder(HouseBuilder):
    def build_shoe(self) -> None:
        self._current().shoe = "red wood"

    def build_door(self) -> None:
        self._current().door = "brown wood"

    def build_floor(self) -> None:
        self._current().floor = 2


class IceHouseBuilder(HouseBuilder):
    def build_shoe(self) -> None:
        self._current().shoe = "ice-cream"

    def build_door(self) -> None:
        self._current().door = "ice flower"

    def build_floor(self) -> None:
        self._current().floor = 1


class Director:
    """Runs a builder through the full construction sequence."""

    def __init__(self) -> None:
        self.builder: HouseBuilder | None = None

    def _require_builder(self) -> HouseBuilder:
        if self.builder is None:
            raise RuntimeError("no builder selected")
        return self.builder

    def use(self, builder: HouseBuilder) -> None:
        self.builder = builder

    def construct(self) -> None:
        builder = self._require_builder()
        builder.create()
        builder.build_shoe()
        builder.build_door()
        builder.build_floor()

    def get_house(self) -> House | None:
        return self._require_builder().house


def main(argv: list[str] | None = None) -> int:
    """Build and describe a wood house and an ice house."""
    director = Director()
    for builder in (WoodHouseBuilder(), IceHouseBuilder()):
        director.use(builder)
        director.construct()
        print(director.get_house().describe())
    return 0
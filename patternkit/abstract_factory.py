"""Families of related sportswear products created through brand factories."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Shoe(ABC):
    """A shoe produced by some brand."""

    @abstractmethod
    def introduce(self) -> str:
        """Return the product's introduction line."""


class Short(ABC):
    """A pair of shorts produced by some brand."""

    @abstractmethod
    def introduce(self) -> str:
        """Return the product's introduction line."""


class AdidasShoe(Shoe):
    def introduce(self) -> str:
        return "Introducing on a Adidas style Short."


class AdidasShort(Short):
    def introduce(self) -> str:
        return "Introducing on a Adidas style Short."


class NikeShoe(Shoe):
    def introduce(self) -> str:
        return "Introducing on a Nike style Short."


class NikeShort(Short):
    def introduce(self) -> str:
        return "Introducing on a Nike style Short."


class Factory(ABC):
    """Creates a matching shoe and pair of shorts."""

    @abstractmethod
    def create_shoe(self) -> Shoe:
        """Return a new shoe of this brand."""

    @abstractmethod
    def create_short(self) -> Short:
        """Return a new pair of shorts of this brand."""


class Adidas(Factory):
    def create_shoe(self) -> Shoe:
        return AdidasShoe()

    def create_short(self) -> Short:
        return AdidasShort()


class Nike(Factory):
    def create_shoe(self) -> Shoe:
        return NikeShoe()

    def create_short(self) -> Short:
        return NikeShort()


def main(argv: list[str] | None = None) -> int:
    """Introduce one shoe and one pair of shorts from each brand."""
    for factory in (Adidas(), Nike()):
        print(factory.create_shoe().introduce())
        print(factory.create_short().introduce())
    return 0
"""Creating animals by kind through a factory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class AnimalType(Enum):
    DOG = "dog"
    CAT = "cat"
    BUTTERFLY = "butterfly"


class Animal(ABC):
    @abstractmethod
    def call_name(self) -> str:
        """Return the animal's announcement."""


class Dog(Animal):
    def call_name(self) -> str:
        return "It's Dog"


class Cat(Animal):
    def call_name(self) -> str:
        return "It's Cat"


class Butterfly(Animal):
    def call_name(self) -> str:
        return "It's Butterfly"


class AnimalFactory:
    """Creates an animal for a given kind; anything else is a butterfly."""

    def create(self, animal_type: AnimalType) -> Animal:
        if animal_type is AnimalType.DOG:
            return Dog()
        if animal_type is AnimalType.CAT:
            return Cat()
        return Butterfly()


def main(argv: list[str] | None = None) -> int:
    """Create one animal of each kind and announce them."""
    factory = AnimalFactory()
    animals = [factory.create(kind) for kind in AnimalType]
    for animal in animals:
        print(animal.call_name())
    return 0
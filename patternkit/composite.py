"""Searching files individually or through a folder that groups them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    @abstractmethod
    def search(self, key: str) -> list[str]:
        """Return the search report lines for this component."""


class File(Component):
    def __init__(self, name: str) -> None:
        self.name = name

    def search(self, key: str) -> list[str]:
        return [f"Search {key} in {self.name}"]


class Folder(Component):
    def __init__(self, name: str) -> None:
        self.name = name
        self.files: list[File] = []

    def add(self, file: File) -> None:
        self.files.append(file)

    def search(self, key: str) -> list[str]:
        return [line for file in self.files for line in file.search(key)]


def main(argv: list[str] | None = None) -> int:
    """Search a folder of three leaves."""
    folder = Folder("Tree")
    for name in ("leaf 1", "leaf 2", "leaf 3"):
        folder.add(File(name))
    for line in folder.search("Money"):
        print(line)
    return 0
"""A file tree whose nodes can deep-copy themselves."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Inode(ABC):
    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def clone(self) -> Inode:
        """Return an independent copy of this node."""

    @abstractmethod
    def render(self) -> str:
        """Return the textual listing of this node."""


class File(Inode):
    def clone(self) -> File:
        return File(self.name)

    def render(self) -> str:
        return self.name


class Folder(Inode):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.children: list[Inode] = []

    def insert(self, inode: Inode) -> None:
        self.children.append(inode)

    def clone(self) -> Folder:
        copy = Folder(self.name)
        for child in self.children:
            copy.insert(child.clone())
        return copy

    def render(self) -> str:
        return f"{self.name}:\n" + "".join(f"{child.render()}\n" for child in self.children)


def main(argv: list[str] | None = None) -> int:
    """Clone a small folder tree and print the copy."""
    folder1 = Folder("folder 1")
    folder1.insert(File("file 1"))
    folder2 = Folder("folder 2")
    folder2.insert(folder1)
    folder2.insert(File("file 2"))
    folder2.insert(File("file 3"))
    print(folder2.clone().render(), end="")
    return 0
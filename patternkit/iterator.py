"""A bounded node list with an explicit iterator."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

CAPACITY = 100


@dataclass
class Node:
    value: int


class NodeIterator:
    """Walks a snapshot of nodes taken when the iterator was created."""

    def __init__(self, nodes: Iterable[Node]) -> None:
        self._nodes = list(nodes)
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._nodes)

    def get_next(self) -> Node:
        if not self.has_next():
            raise IndexError("no more nodes")
        node = self._nodes[self._index]
        self._index += 1
        return node

    def __iter__(self) -> NodeIterator:
        return self

    def __next__(self) -> Node:
        if not self.has_next():
            raise StopIteration
        return self.get_next()


class NodeList:
    """Holds up to CAPACITY nodes."""

    def __init__(self) -> None:
        self._nodes: list[Node] = []

    def add(self, node: Node) -> None:
        if len(self._nodes) >= CAPACITY:
            raise OverflowError(f"node list holds at most {CAPACITY} nodes")
        self._nodes.append(node)

    def create_iterator(self) -> NodeIterator:
        return NodeIterator(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return self.create_iterator()

    def __len__(self) -> int:
        return len(self._nodes)


def main(argv: list[str] | None = None) -> int:
    """Print the values of three nodes in order."""
    nodes = NodeList()
    for value in (1, 2, 3):
        nodes.add(Node(value))
    iterator = nodes.create_iterator()
    while iterator.has_next():
        print(iterator.get_next().value)
    return 0
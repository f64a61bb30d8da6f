"""Saving and restoring a face's expression."""

from __future__ import annotations

from dataclasses import dataclass

CAPACITY = 100


@dataclass(frozen=True)
class Emoji:
    """A saved snapshot of a face's state."""

    state: str


class Face:
    def __init__(self, state: str) -> None:
        self.state = state

    def create(self) -> Emoji:
        return Emoji(self.state)

    def restore(self, emoji: Emoji) -> None:
        self.state = emoji.state


class Caretaker:
    """Keeps up to CAPACITY snapshots in the order they were added."""

    def __init__(self) -> None:
        self._states: list[Emoji] = []

    def add(self, emoji: Emoji) -> None:
        if len(self._states) >= CAPACITY:
            raise OverflowError(f"caretaker holds at most {CAPACITY} states")
        self._states.append(emoji)

    def get(self, index: int) -> Emoji:
        return self._states[index]

    def __len__(self) -> int:
        return len(self._states)


def main(argv: list[str] | None = None) -> int:
    """Save two expressions, change the face, then restore the first."""
    caretaker = Caretaker()
    face = Face("Happy")
    caretaker.add(face.create())
    face.state = "Sad"
    caretaker.add(face.create())
    face.state = "Angry"
    face.restore(caretaker.get(0))
    print(face.state)
    return 0
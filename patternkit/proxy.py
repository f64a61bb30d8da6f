"""An image proxy that loads the real image only when first displayed."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

Log = Callable[[str], object]


class Image(ABC):
    @abstractmethod
    def display(self) -> None:
        """Display the image."""


class RealImage(Image):
    """An image loaded from disk as soon as it is created."""

    def __init__(self, filename: str, log: Log = print) -> None:
        self.filename = filename
        self.log = log
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        self.log(f"Loading {self.filename}")

    def display(self) -> None:
        self.log(f"Displaying {self.filename}")


class ProxyImage(Image):
    """Defers creating the real image until display is first called."""

    def __init__(self, filename: str, log: Log = print) -> None:
        self.filename = filename
        self.log = log
        self._real: RealImage | None = None

    @property
    def loaded(self) -> bool:
        return self._real is not None

    def display(self) -> None:
        if self._real is None:
            self._real = RealImage(self.filename, self.log)
        self._real.display()


def main(argv: list[str] | None = None) -> int:
    """Display one image twice and another once."""
    image1 = ProxyImage("test_image_1.jpg")
    image2 = ProxyImage("test_image_2.jpg")
    print("Calling display on image1 first time:")
    image1.display()
    print("Calling display on image1 second time:")
    image1.display()
    print("Calling display on image2 first time:")
    image2.display()
    return 0
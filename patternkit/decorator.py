"""Streams whose writes can be wrapped by compression and encryption."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Stream(ABC):
    @abstractmethod
    def write(self, data: str) -> str:
        """Write data and return a description of what was written."""


class FileStream(Stream):
    def write(self, data: str) -> str:
        return f"Writing data to file: {data}"


class StreamDecorator(Stream, ABC):
    """A stream that transforms data before passing it to another stream."""

    def __init__(self, wrapped: Stream) -> None:
        self.wrapped = wrapped


class CompressedStream(StreamDecorator):
    def write(self, data: str) -> str:
        return self.wrapped.write(self.compress(data))

    def compress(self, data: str) -> str:
        return f"compressed({data})"


class EncryptedStream(StreamDecorator):
    def write(self, data: str) -> str:
        return self.wrapped.write(self.encrypt(data))

    def encrypt(self, data: str) -> str:
        return f"encrypted({data})"


def main(argv: list[str] | None = None) -> int:
    """Write through plain, compressed, encrypted and stacked streams."""
    streams = [
        FileStream(),
        CompressedStream(FileStream()),
        EncryptedStream(FileStream()),
        CompressedStream(EncryptedStream(FileStream())),
    ]
    for stream in streams:
        print(stream.write("Hello, World!"))
    return 0
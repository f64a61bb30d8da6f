"""A CPU that calls a pluggable scheduling algorithm when full."""

from __future__ import annotations


class Algorithm:
    """A scheduling algorithm; its label defaults to the class name."""

    label: str | None = None

    def quit(self, cpu: CPU) -> str:
        """Release a job from the CPU and describe the call."""
        name = self.label or type(self).__name__
        return f"Call {name}"


class FCFS(Algorithm):
    """First come, first served."""


class SJF(Algorithm):
    """Shortest job first."""


class RR(Algorithm):
    """Round robin."""


class CPU:
    """Tracks load; the algorithm may be swapped at any time."""

    def __init__(self, capacity: int, max_capacity: int, algorithm: Algorithm) -> None:
        self.capacity = capacity
        self.max_capacity = max_capacity
        self.algorithm = algorithm
        self.queue: list[str] = []

    def add(self, name: str) -> None:
        self.queue.append(name)
        self.capacity += 1

    def check_capacity(self) -> str | None:
        """Run the algorithm once if the CPU is at or over its limit."""
        if self.capacity >= self.max_capacity:
            result = self.algorithm.quit(self)
            self.capacity -= 1
            return result
        return None


def main(argv: list[str] | None = None) -> int:
    """Fill a CPU with a round-robin algorithm and check it."""
    cpu = CPU(0, 2, FCFS())
    cpu.algorithm = RR()
    cpu.add("a")
    cpu.add("b")
    result = cpu.check_capacity()
    if result is not None:
        print(result)
    return 0
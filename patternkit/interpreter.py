"""A small stack-based interpreter for single-character expressions."""

from __future__ import annotations

import string
import sys
from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from dataclasses import dataclass

Variables = MutableMapping[str, int]

OPERATORS = "+-*/"


class Expression(ABC):
    @abstractmethod
    def interpret(self, variables: Variables) -> int:
        """Evaluate the expression against the given variables."""


@dataclass
class Number(Expression):
    value: int

    def interpret(self, variables: Variables) -> int:
        return self.value


@dataclass
class Variable(Expression):
    """A named value; an unknown name is set to 0 and read as 0."""

    name: str

    def interpret(self, variables: Variables) -> int:
        return variables.setdefault(self.name, 0)


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


@dataclass
class Operator(Expression):
    """A binary operation; an unknown operator evaluates to 0."""

    op: str
    left: Expression
    right: Expression

    def interpret(self, variables: Variables) -> int:
        if self.op not in OPERATORS:
            return 0
        left = self.left.interpret(variables)
        right = self.right.interpret(variables)
        if self.op == "+":
            return left + right
        if self.op == "-":
            return left - right
        if self.op == "*":
            return left * right
        return _truncating_div(left, right)


class Parser:
    """Builds expressions on a stack that persists across parse calls."""

    def __init__(self) -> None:
        self.expressions: list[Expression] = []

    def _pop(self, op: str) -> Expression:
        if not self.expressions:
            raise ValueError(f"not enough operands for {op!r}")
        return self.expressions.pop()

    def parse(self, expression: str) -> None:
        """Push letters, digits and operators; other characters are ignored."""
        for char in expression:
            if char in string.ascii_letters:
                self.expressions.append(Variable(char))
            elif char in string.digits:
                self.expressions.append(Number(int(char)))
            elif char in OPERATORS:
                left = self._pop(char)
                right = self._pop(char)
                self.expressions.append(Operator(char, left, right))

    def evaluate(self, variables: Variables) -> int:
        if not self.expressions:
            raise ValueError("nothing to evaluate")
        return self.expressions[-1].interpret(variables)


class SimpleParser(Parser):
    def evaluate(self, expression: str, variables: Variables) -> int:  # type: ignore[override]
        """Parse the expression and evaluate the result."""
        self.parse(expression)
        return super().evaluate(variables)


def main(argv: list[str] | None = None) -> int:
    """Evaluate a sample expression with four variables."""
    variables = {"a": 5, "b": 10, "c": 2, "d": 3}
    try:
        result = SimpleParser().evaluate("a+b*c-d", variables)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Result: {result}")
    return 0
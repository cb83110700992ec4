"""Syntax tree nodes for the small arithmetic script language."""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from typing import Callable

from rappy.helpers import to_float

Evaluator = Callable[[], float]

_NUMBER_START = re.compile(r"[+-.0-9]")
_ARGUMENT_START = re.compile(r"[a-zA-Z]")
_OPERATOR_START = re.compile(r"[+\-*/^]")

_PRIORITIES = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def _first_matches(pattern: re.Pattern[str], text: str) -> bool:
    return bool(text) and pattern.fullmatch(text[0]) is not None


def _divide(left: float, right: float) -> float:
    if right != 0.0:
        return left / right
    if left == 0.0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _power(left: float, right: float) -> float:
    try:
        return math.pow(left, right)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
    "^": _power,
}


class Node(ABC):
    """A node that can be turned into a function of no arguments."""

    @abstractmethod
    def compile(self) -> Evaluator:
        """Return a callable that evaluates this node."""


class NumberNode(Node):
    """A numeric literal."""

    def __init__(self, text: str) -> None:
        self.value = to_float(text)

    @staticmethod
    def match(text: str) -> bool:
        """Whether ``text`` starts like a number."""
        return _first_matches(_NUMBER_START, text)

    def compile(self) -> Evaluator:
        value = self.value
        return lambda: value


class ArgumentNode(Node):
    """A named function argument whose value is set before evaluation."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.value = 0.0

    @staticmethod
    def match(text: str) -> bool:
        """Whether ``text`` starts like an argument name."""
        return _first_matches(_ARGUMENT_START, text)

    def compile(self) -> Evaluator:
        return lambda: self.value


class BinaryOpNode(Node):
    """An operator applied to two sub-expressions."""

    def __init__(self, op: str, left: Node, right: Node) -> None:
        self.op = op
        self.left = left
        self.right = right

    @staticmethod
    def match(text: str) -> bool:
        """Whether ``text`` starts with an operator."""
        return _first_matches(_OPERATOR_START, text)

    @staticmethod
    def priority(op: str) -> int:
        """Binding strength of an operator; higher binds tighter."""
        try:
            return _PRIORITIES[op]
        except KeyError:
            raise ValueError(f"Invalid operator: {op}") from None

    def compile(self) -> Evaluator:
        left = self.left.compile()
        right = self.right.compile()
        try:
            operation = _OPERATIONS[self.op]
        except KeyError:
            raise ValueError(f"Invalid operator: {self.op}") from None
        return lambda: operation(left(), right())
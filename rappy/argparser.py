"""A small parser for positional and ``--tag`` command line arguments."""

from __future__ import annotations

from collections import deque
from typing import Sequence

from rappy.argument import NPOS, Argument, ParseFunc, Setter


class ArgumentParser:
    """Collects arguments, parses a command line and describes its usage."""

    def __init__(self, program_name: str) -> None:
        self.program_name = program_name
        self._positional: list[Argument] = []
        self._tagged: list[Argument] = []

    def add_positional(self, setter: Setter, tag: str, explanation: str, kind: type = str) -> None:
        position = len(self._positional) + 1
        self._positional.append(Argument.typed(setter, kind, tag, explanation, True, position))

    def add_positional_func(self, func: ParseFunc, tag: str, explanation: str, format: str) -> None:
        position = len(self._positional) + 1
        self._positional.append(Argument(tag, explanation, True, position, format, func))

    def add_required(self, setter: Setter, tag: str, explanation: str, kind: type = str) -> None:
        self._tagged.append(Argument.typed(setter, kind, tag, explanation, True))

    def add_required_func(self, func: ParseFunc, tag: str, explanation: str, format: str) -> None:
        self._tagged.append(Argument(tag, explanation, True, NPOS, format, func))

    def add_optional(self, setter: Setter, tag: str, explanation: str, kind: type = str) -> None:
        self._tagged.append(Argument.typed(setter, kind, tag, explanation, False))

    def add_optional_func(self, func: ParseFunc, tag: str, explanation: str, format: str) -> None:
        self._tagged.append(Argument(tag, explanation, False, NPOS, format, func))

    def parse(self, argv: Sequence[str]) -> None:
        """Parse the arguments that follow the program name."""
        args = deque(argv)

        positional_passed = [arg.get(args) for arg in self._positional]

        passed = [False] * len(self._tagged)
        while args:
            head = args[0]
            for index, arg in enumerate(self._tagged):
                if arg.get(args):
                    passed[index] = True
                    break
            else:
                raise ValueError(f"Unrecognized argument: {head}")

        for arg, ok in zip(self._positional, positional_passed):
            if not ok:
                raise ValueError(f"Missing {arg.tag} at argument {arg.position}")

        for arg, ok in zip(self._tagged, passed):
            if arg.required and not ok:
                raise ValueError(f"Missing required argument: {arg.tag}")

    def description(self) -> str:
        """A usage line followed by one line per argument."""
        arguments = [*self._positional, *self._tagged]
        usage = " ".join([self.program_name, *(arg.usage() for arg in arguments)])
        lines = [usage]
        for arg in arguments:
            lines.append(f"{arg.tag}: {arg.explanation}" if arg.explanation else arg.tag)
        return "\n".join(lines)
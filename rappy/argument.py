"""Command line arguments that consume values from a queue of strings."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque

from rappy.color import Color
from rappy.duration import Duration
from rappy.helpers import to_float, to_int

ArgQueue = Deque[str]
ParseFunc = Callable[[ArgQueue], bool]
Setter = Callable[[Any], None]

NPOS = -1

_CONVERTERS: dict[type, tuple[str, Callable[[str], Any]]] = {
    int: ("#", to_int),
    float: ("#.#", to_float),
    str: ('""', str),
    Duration: ("#s", Duration.from_string),
    Color: ("RGB", Color.from_string),
}


def int_list_from_args(args: ArgQueue, out: list[int]) -> bool:
    """Consume leading integers from ``args`` into ``out``; True if any were read."""
    count = 0
    while args:
        try:
            number = to_int(args[0])
        except ValueError:
            break
        out.append(number)
        args.popleft()
        count += 1
    return count > 0


class Argument:
    """One positional or tagged argument and the function that parses it.

    The parse function takes the queue of remaining arguments, consumes what
    it needs from the front and returns whether it succeeded.
    """

    NPOS = NPOS

    def __init__(
        self,
        tag: str,
        explanation: str,
        required: bool,
        position: int,
        format: str,
        parse_func: ParseFunc,
    ) -> None:
        if not tag:
            raise ValueError("Argument cannot have an empty tag")
        if not callable(parse_func):
            raise TypeError("Must provide a parse function")
        self.tag = tag
        self.explanation = explanation
        self.required = required
        self.position = position
        self.format = format
        self._parse_func = parse_func

    @classmethod
    def typed(
        cls,
        setter: Setter,
        kind: type,
        tag: str,
        explanation: str,
        required: bool = False,
        position: int = NPOS,
    ) -> Argument:
        """Build an argument that converts its value to ``kind`` and hands it to ``setter``.

        ``bool`` arguments take no value and pass ``True``; ``list`` arguments
        take one or more integers and pass them as a list.
        """
        if kind is bool:

            def parse_flag(args: ArgQueue) -> bool:
                setter(True)
                return True

            return cls(tag, explanation, required, position, "", parse_flag)

        if kind is list:

            def parse_list(args: ArgQueue) -> bool:
                values: list[int] = []
                found = int_list_from_args(args, values)
                if found:
                    setter(values)
                return found

            return cls(tag, explanation, required, position, "...", parse_list)

        try:
            fmt, convert = _CONVERTERS[kind]
        except KeyError:
            raise TypeError(f"Unsupported argument type: {kind!r}") from None

        def parse_value(args: ArgQueue) -> bool:
            if not args:
                return False
            setter(convert(args[0]))
            args.popleft()
            return True

        return cls(tag, explanation, required, position, fmt, parse_value)

    def get(self, args: ArgQueue) -> bool:
        """Try to parse this argument from the front of ``args``."""
        if self.position == NPOS:
            if not args:
                return False
            head = args[0]
            if len(head) <= 2 or head[2:] != self.tag:
                return False
            args.popleft()
        return self._parse_func(args)

    def usage(self) -> str:
        """The argument as shown in a usage line."""
        suffix = f" {self.format}" if self.format else ""
        if self.position != NPOS:
            return f"<{self.tag}{suffix}>"
        if self.required:
            return f"<--{self.tag}{suffix}>"
        return f"[--{self.tag}{suffix}]"


def make_queue(argv: list[str]) -> ArgQueue:
    """A queue of arguments suitable for :meth:`Argument.get`."""
    return deque(argv)
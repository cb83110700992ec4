"""Parser for small arithmetic functions such as ``(a,b){a+b*2}``."""

from __future__ import annotations

import re
from typing import Callable, Sequence

from rappy.helpers import plural
from rappy.nodes import ArgumentNode, BinaryOpNode, Node, NumberNode

MAX_ARITY = 3

_WHITESPACE = " \t\n\v\f\r"
_FUNCTION = re.compile(r"\((.*)\)\{(.+\})")
_ARGUMENT = re.compile(r"[a-zA-Z][_a-zA-Z0-9]*")
_NUMBER = re.compile(
    r"[+-]?(?:[0-9]+(?:[.][0-9]*)?(?:[eE][+-]?[0-9]+)?|[.][0-9]+(?:[eE][+-]?[0-9]+)?)"
)


class ScriptError(ValueError):
    """Raised when a script cannot be parsed."""


def parse_function(script: str) -> tuple[str, str]:
    """Split a script into its argument list and its body.

    Whitespace is removed and the body's closing brace becomes a closing
    parenthesis, so the body can be parsed as a bracketed expression.
    """
    stripped = "".join(char for char in script if char not in _WHITESPACE)
    match = _FUNCTION.fullmatch(stripped)
    if match is None:
        raise ScriptError(f'Script did not look like a function: "{stripped}"')
    return match.group(1), match.group(2)[:-1] + ")"


def parse_arguments(args: str, expected: int) -> list[ArgumentNode]:
    """Create one argument node per name in ``args``."""
    arguments = [ArgumentNode(name) for name in _ARGUMENT.findall(args)]
    if len(arguments) != expected:
        raise ScriptError(f"Expected function to have {expected} argument{plural(expected)}")
    return arguments


def _parse_argument(text: str, pos: int, arguments: Sequence[ArgumentNode]) -> tuple[Node, int]:
    for argument in arguments:
        if text.startswith(argument.name, pos):
            return argument, pos + len(argument.name)
    raise ScriptError(f"Parse error: Unexpected argument: {text[pos:]}")


def _parse_number(text: str, pos: int) -> tuple[Node, int]:
    match = _NUMBER.match(text, pos)
    if match is None:
        raise ScriptError(f"Parse error: Unexpected number: {text[pos:]}")
    return NumberNode(match.group(0)), match.end()


def _parse_expression(text: str, pos: int, arguments: Sequence[ArgumentNode]) -> tuple[Node, int]:
    nodes: list[Node] = []
    ops: list[str] = []

    while True:
        rest = text[pos:]
        if not rest:
            raise ScriptError("Parse error: Unexpected end of script")
        head = rest[0]
        if head == "(":
            node, pos = _parse_expression(text, pos + 1, arguments)
            nodes.append(node)
        elif head == ")":
            pos += 1
            break
        elif ArgumentNode.match(rest):
            node, pos = _parse_argument(text, pos, arguments)
            nodes.append(node)
        elif BinaryOpNode.match(rest) and len(nodes) > len(ops):
            ops.append(head)
            pos += 1
        elif NumberNode.match(rest):
            node, pos = _parse_number(text, pos)
            nodes.append(node)
        else:
            raise ScriptError(f"Parse error: Unexpected token: {rest}")

    if not nodes:
        raise ScriptError("Parse error: Cannot have empty brackets")
    if len(nodes) != len(ops) + 1:
        raise ScriptError("Parse error: Must provide an argument on either side of an operation")

    while ops:
        # The leftmost operator of the highest priority binds first.
        index = max(range(len(ops)), key=lambda i: BinaryOpNode.priority(ops[i]))
        op = ops.pop(index)
        nodes[index : index + 2] = [BinaryOpNode(op, nodes[index], nodes[index + 1])]

    return nodes[0], pos


def parse_expression(expr: str, arguments: Sequence[ArgumentNode]) -> Node:
    """Parse a body that ends with a closing parenthesis into a tree."""
    node, _ = _parse_expression(expr, 0, arguments)
    return node


def parse(script: str, arity: int = 0) -> Callable[..., float]:
    """Compile a script into a function taking ``arity`` numbers."""
    if not 0 <= arity <= MAX_ARITY:
        raise ValueError(f"Can only provide functions with a maximum of {MAX_ARITY} arguments")
    args_text, expr = parse_function(script)
    arguments = parse_arguments(args_text, arity)
    evaluate = parse_expression(expr, arguments).compile()

    def function(*values: float) -> float:
        if len(values) != arity:
            raise TypeError(f"Expected {arity} argument{plural(arity)}, got {len(values)}")
        for argument, value in zip(arguments, values):
            argument.value = float(value)
        return evaluate()

    return function
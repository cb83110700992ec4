"""Command that evaluates a script function with numbers from the command line."""

from __future__ import annotations

import sys
from typing import Sequence

from rappy.helpers import to_float
from rappy.log import logger
from rappy.script import MAX_ARITY, parse


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate ``argv[0]`` as a function of the numbers that follow it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        logger.error("Expected at least one argument")
        return 1
    func_str, *raw_values = args

    try:
        values = [to_float(raw) for raw in raw_values]
    except ValueError as error:
        logger.error(error)
        return 1

    if len(values) > MAX_ARITY:
        logger.error(f"Can only provide functions with a maximum of {MAX_ARITY} arguments")
        return 1

    try:
        result = parse(func_str, len(values))(*values)
    except ValueError as error:
        logger.error(error)
        return 1

    logger.info(f"{result:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
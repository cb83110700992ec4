"""Connections that feed input values, optionally through a script, to an output."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from rappy.endpoints import Consumer, Input, Output, Producer
from rappy.jsonhelper import value_or_raise
from rappy.script import MAX_ARITY, parse

Connection = Callable[[], None]

_PREFIX = "parse_connection()"


def split_bind(bind: str) -> tuple[str, str]:
    """Split ``name.key`` at the first period."""
    name, period, key = bind.partition(".")
    if not period:
        raise ValueError("Connections must contain at least one period")
    return name, key


def parse_connection(
    cfg: Mapping[str, Any],
    inputs: Mapping[str, Input],
    outputs: Mapping[str, Output],
) -> Connection:
    """Build a callable that moves values from the named inputs to the named output.

    Every key other than ``function`` and ``output`` names a variable bound to
    an input; ``function`` is the body of a script over those variables.
    """
    producers: list[tuple[str, Producer]] = []
    consumer: Consumer | None = None
    func_str = ""
    for key, raw in cfg.items():
        text = value_or_raise(raw, _PREFIX, str)
        if key == "function":
            func_str = text
            continue
        name, bind_key = split_bind(text)
        if key == "output":
            consumer = outputs[name].get_consumer(bind_key)
        else:
            producers.append((key, inputs[name].get_producer(bind_key)))

    if not producers:
        raise ValueError("Must provide at least one input in a connection")
    if consumer is None:
        raise ValueError("Must provide one output in a connection")
    if len(producers) > 1 and not func_str:
        raise ValueError("Must provide a function for multiple inputs in a connection")

    sink = consumer

    if not func_str:
        producer = producers[0][1]

        def direct() -> None:
            sink(producer())

        return direct

    if len(producers) > MAX_ARITY:
        raise ValueError("More than three inputs to a connection is not supported")

    names = ",".join(name for name, _ in producers)
    func = parse(f"({names}){{{func_str}}}", len(producers))
    sources = [producer for _, producer in producers]

    def through_function() -> None:
        sink(func(*(source() for source in sources)))

    return through_function
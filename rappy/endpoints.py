"""Base classes for the inputs and outputs that connections join together."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

Producer = Callable[[], float]
Consumer = Callable[[float], None]


class Input(ABC):
    """A source of values, read through named producers."""

    def __init__(self, kind: str) -> None:
        self.kind = kind

    @abstractmethod
    def poll(self) -> None:
        """Refresh the input's state."""

    @abstractmethod
    def get_producer(self, key: str) -> Producer:
        """A callable that returns the current value named by ``key``."""

    def read(self, key: str) -> float:
        """The current value named by ``key``."""
        return self.get_producer(key)()


class Output(ABC):
    """A sink of values, written through named consumers and advanced by steps."""

    def __init__(self, kind: str) -> None:
        self.kind = kind

    @abstractmethod
    def get_consumer(self, key: str) -> Consumer:
        """A callable that sets the value named by ``key``."""

    @abstractmethod
    def step(self) -> None:
        """Advance the output by one loop iteration."""
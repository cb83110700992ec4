"""A span of time held in whole nanoseconds."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from rappy.helpers import to_float

_THOUSAND = 1000.0
_NS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True, order=True)
class Duration:
    """A duration with nanosecond resolution."""

    ns: int = 0

    @classmethod
    def from_string(cls, text: str) -> Duration:
        """Parse text such as ``10ms``, ``1.5s``, ``20us``, ``5ns`` or ``2``."""
        if not text:
            raise ValueError("Unrecognized time: Empty string")
        scale = 1.0
        if text.endswith("s"):
            text = text[:-1]
        if not text:
            raise ValueError(f"Unrecognized time: {text}")
        suffix = text[-1]
        if suffix in "num":
            for unit in "num":
                if unit == "n" and suffix != "n":
                    continue
                if unit == "u" and suffix == "m":
                    continue
                scale /= _THOUSAND
            text = text[:-1]
        return cls.from_seconds(to_float(text) * scale)

    @classmethod
    def from_seconds(cls, seconds: float) -> Duration:
        """Build a duration from seconds, rounded to the nearest nanosecond."""
        return cls(round(seconds * _NS_PER_SECOND))

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        """Build a duration from a whole number of nanoseconds."""
        return cls(int(nanoseconds))

    def seconds(self) -> float:
        """The duration in seconds."""
        return self.ns / _NS_PER_SECOND

    def milliseconds(self) -> int:
        """The duration in whole milliseconds, rounded half to even."""
        return round(Fraction(self.ns, 1_000_000))

    def __float__(self) -> float:
        return self.seconds()
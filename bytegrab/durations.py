"""Parsing of human-written durations such as ``1h 30m`` or ``90``."""

from __future__ import annotations

import re
from datetime import timedelta
from fractions import Fraction

from .errors import ByteError

_NS = 1
_US = 1_000 * _NS
_MS = 1_000 * _US
_S = 1_000 * _MS
_MIN = 60 * _S
_HOUR = 60 * _MIN
_DAY = 24 * _HOUR

_UNIT_NAMES: dict[int, tuple[str, ...]] = {
    365 * _DAY: ("y", "year", "years"),
    30 * _DAY: ("mon", "month", "months"),
    7 * _DAY: ("w", "week", "weeks"),
    _DAY: ("d", "day", "days"),
    _HOUR: ("h", "hr", "hour", "hours"),
    _MIN: ("m", "min", "minute", "minutes"),
    _S: ("s", "sec", "second", "seconds"),
    _MS: ("ms", "msec", "millisecond", "milliseconds"),
    _US: ("µs", "μs", "us", "microsecond", "microseconds"),
    _NS: ("ns", "nanosecond", "nanoseconds"),
}

_UNITS = {name: scale for scale, names in _UNIT_NAMES.items() for name in names}

_TERM = re.compile(r"\s*(\d+(?:\.\d+)?)\s*([^\d\s+*.]*)\s*(?:\*\s*(\d+)\s*)?")


def parse_duration(text: str) -> timedelta:
    """Parse a sum of ``<number><unit>`` terms; a bare number means seconds.

    Terms may be separated by whitespace or ``+``, and a term may be
    multiplied by a whole number with ``*``.
    """
    source = text.strip()
    if not source:
        raise ByteError("empty duration")

    total = Fraction(0)
    pos = 0
    while pos < len(source):
        match = _TERM.match(source, pos)
        if match is None or match.end() == pos:
            raise ByteError(f"invalid duration: {text!r}")
        value, unit, factor = match.groups()
        scale = _UNITS.get(unit.lower() if unit else "s")
        if scale is None:
            raise ByteError(f"unknown duration unit: {unit!r}")
        amount = Fraction(value) * scale
        if factor:
            amount *= int(factor)
        total += amount
        pos = match.end()
        if pos < len(source) and source[pos] == "+":
            pos += 1
            if pos >= len(source):
                raise ByteError(f"invalid duration: {text!r}")

    try:
        return timedelta(microseconds=int(total) // _US)
    except OverflowError as exc:
        raise ByteError(f"duration too large: {text!r}") from exc
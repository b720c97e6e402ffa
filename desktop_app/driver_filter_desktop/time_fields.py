"""Helpers for the HH/MM/SS sub-fields of a break time."""

from __future__ import annotations

import re

HOUR_MAX = 23
MINUTE_MAX = 59
SECOND_MAX = 59

_NON_DIGITS = re.compile(r"\D")


def normalize_component(raw: str, maximum: int) -> str:
    """Return ``raw`` as a clamped, zero-padded two digit value.

    Everything that is not a digit is dropped first. Nothing left means the
    field has not been filled in yet and yields an empty string.
    """

    digits = _NON_DIGITS.sub("", raw or "")
    if not digits:
        return ""
    value = max(0, min(maximum, int(digits)))
    return f"{value:02d}"


def compose_time(hour: str, minute: str, second: str, *, fill: bool = False) -> str:
    """Join the three components with ``:``.

    With ``fill`` empty components become ``"00"``; without it partial input
    is kept as it is so validation can report it.
    """

    parts = (hour, minute, second)
    if fill:
        parts = tuple(part or "00" for part in parts)
    return ":".join(parts)


def split_time(value: str) -> tuple[str, str, str]:
    parts = (value or "").split(":")
    parts += [""] * (3 - len(parts))
    return parts[0], parts[1], parts[2]


__all__ = [
    "HOUR_MAX",
    "MINUTE_MAX",
    "SECOND_MAX",
    "normalize_component",
    "compose_time",
    "split_time",
]

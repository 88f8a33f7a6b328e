"""Rotation angle validation and arithmetic."""

from __future__ import annotations

import re
from typing import Optional

ACCEPTABLE_ANGLES: tuple[int, ...] = (0, 90, 180, 270, -90, -180, -270)
FULL_TURN = 360

_INTEGER_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def parse_angle(text: str) -> Optional[int]:
    """Parse *text* as a signed base-10 integer, or return ``None``."""

    if not _INTEGER_PATTERN.match(text):
        return None
    try:
        return int(text)
    except ValueError:
        # digit strings beyond the interpreter's conversion limit
        return None


def is_acceptable_angle(angle: int | str) -> bool:
    """Return ``True`` if *angle* is a rotation delta pages may be turned by.

    Strings are parsed first; text that is not an integer is simply not
    acceptable.
    """

    if isinstance(angle, str):
        parsed = parse_angle(angle)
        if parsed is None:
            return False
        angle = parsed
    if isinstance(angle, bool) or not isinstance(angle, int):
        return False
    return angle in ACCEPTABLE_ANGLES


def reduce_angle(angle: int) -> int:
    """Reduce *angle* modulo a full turn, keeping its sign.

    This is truncated-division remainder, so ``reduce_angle(-450) == -90``
    where Python's ``%`` would give ``270``.
    """

    remainder = abs(angle) % FULL_TURN
    return -remainder if angle < 0 else remainder


def combine_rotation(existing: Optional[int], delta: int) -> int:
    """Return the rotation a page ends up with after turning it by *delta*.

    A page without a rotation entry takes *delta* as-is.
    """

    if existing is None:
        return delta
    return reduce_angle(existing + delta)


__all__ = [
    "ACCEPTABLE_ANGLES",
    "parse_angle",
    "is_acceptable_angle",
    "reduce_angle",
    "combine_rotation",
]

"""Declarative display patterns for decimal values.

Patterns follow the numeral.js notation used by the UI:

    0,0           grouped integer               1,235
    0,0.00        two fixed decimals            1,234.57
    0,0.[0000]    up to four decimals           1,234.5679 / 1,234.5
    0,0.00a       abbreviated with k/m/b/t      1.23k
    0,0.[00]%     percentage of a fraction      12.5%

Rounding is half-up on the decimal value, never on a float.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from functools import lru_cache
from typing import Tuple, Union

from numfmt.numbers import EXACT_CONTEXT, bn

_PATTERN_RE = re.compile(
    r"^0(?P<grouped>,0)?"
    r"(?:\.(?P<fixed>0*)(?:\[(?P<optional>0+)\])?)?"
    r"(?P<abbreviated>a)?(?P<percent>%)?$"
)

# (power of ten, suffix), smallest first
_ABBREVIATIONS: Tuple[Tuple[int, str], ...] = ((3, "k"), (6, "m"), (9, "b"), (12, "t"))


@dataclass(frozen=True)
class NumberPattern:
    """Parsed display pattern."""

    grouped: bool
    decimals: int
    optional_decimals: int
    abbreviated: bool
    percent: bool

    @property
    def places(self) -> int:
        return self.decimals + self.optional_decimals


@lru_cache(maxsize=32)
def parse_pattern(pattern: str) -> NumberPattern:
    """Parse a numeral-style pattern string.

    Raises:
        ValueError: If the pattern is not supported.
    """
    match = _PATTERN_RE.match(pattern)
    if not match or pattern.endswith("."):
        raise ValueError(f"Unsupported display pattern: {pattern!r}")
    return NumberPattern(
        grouped=match.group("grouped") is not None,
        decimals=len(match.group("fixed") or ""),
        optional_decimals=len(match.group("optional") or ""),
        abbreviated=match.group("abbreviated") is not None,
        percent=match.group("percent") is not None,
    )


def _abbreviation_index(number: Decimal) -> int:
    """Index into ``_ABBREVIATIONS`` for the magnitude, -1 when none applies."""
    magnitude = number.copy_abs()
    index = -1
    for i, (power, _) in enumerate(_ABBREVIATIONS):
        if magnitude >= Decimal(1).scaleb(power):
            index = i
    return index


def _round(number: Decimal, places: int) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return number.quantize(quantum, rounding=ROUND_HALF_UP, context=EXACT_CONTEXT)


def _trim_optional(fraction: str, optional: int) -> str:
    """Drop up to ``optional`` trailing zeros from the fractional digits."""
    keep = len(fraction) - optional
    trimmed = fraction.rstrip("0")
    return trimmed if len(trimmed) >= keep else fraction[:keep]


def render(pattern: str, value: Union[str, Decimal]) -> str:
    """Render a numeric string with a display pattern."""
    parsed = parse_pattern(pattern)
    number = bn(value)

    if parsed.percent:
        number = number.scaleb(2, EXACT_CONTEXT)

    index = _abbreviation_index(number) if parsed.abbreviated else -1
    if index >= 0:
        number = number.scaleb(-_ABBREVIATIONS[index][0], EXACT_CONTEXT)

    rounded = _round(number, parsed.places)

    # 999.999k rounds to 1000.00k; show 1.00m instead
    if 0 <= index < len(_ABBREVIATIONS) - 1 and rounded.copy_abs() >= 1000:
        index += 1
        rounded = _round(rounded.scaleb(-3, EXACT_CONTEXT), parsed.places)

    integer, _, fraction = format(rounded.copy_abs(), "f").partition(".")
    if parsed.optional_decimals:
        fraction = _trim_optional(fraction, parsed.optional_decimals)
    if parsed.grouped:
        integer = format(Decimal(integer), ",f")

    parts = ["-" if rounded < 0 else "", integer]
    if fraction:
        parts.append(f".{fraction}")
    if index >= 0:
        parts.append(_ABBREVIATIONS[index][1])
    if parsed.percent:
        parts.append("%")
    return "".join(parts)


__all__ = ["NumberPattern", "parse_pattern", "render"]

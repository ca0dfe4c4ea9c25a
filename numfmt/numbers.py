"""Decimal conversion and threshold helpers shared by the formatters."""

from __future__ import annotations

import logging
import re
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_DOWN,
    Context,
    Decimal,
    InvalidOperation,
)
from typing import Iterable

from numfmt.constants import (
    AMOUNT_LOWER_THRESHOLD,
    BN_LOWER_THRESHOLD,
    FIAT_3_DECIMALS_MAX,
    FIAT_3_DECIMALS_MIN,
    INVALID_NUMBER_INPUT_KEYS,
    MAX_DECIMAL_EXPONENT,
    NUMERAL_DECIMAL_LIMIT,
    PERCENTAGE_LOWER_THRESHOLD,
)
from numfmt.errors import InvalidNumberError
from numfmt.types import Numberish

logger = logging.getLogger(__name__)

# Unbounded precision so additions, scaling and quantizing never round
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)

_SAFE_QUANTUM = Decimal(1).scaleb(-NUMERAL_DECIMAL_LIMIT)

# Plain ASCII decimal literals: no underscores, no other digit scripts
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def bn(val: Numberish) -> Decimal:
    """Convert a numberish value to a finite Decimal.

    Floats go through their shortest repr so ``0.1`` becomes
    ``Decimal("0.1")`` rather than the binary expansion.

    Raises:
        InvalidNumberError: If the value is not a finite decimal number,
            or its magnitude lies beyond 10**±MAX_DECIMAL_EXPONENT.
    """
    if isinstance(val, bool):
        raise InvalidNumberError(f"Invalid number: {val!r}")

    if isinstance(val, Decimal):
        number = val
    elif isinstance(val, int):
        number = Decimal(val)
    elif isinstance(val, float):
        number = Decimal(repr(val))
    elif isinstance(val, str):
        text = val.strip()
        if not _NUMBER_RE.fullmatch(text):
            logger.debug("Could not convert %r to a decimal", val)
            raise InvalidNumberError(f"Invalid number: {val!r}")
        try:
            number = Decimal(text)
        except InvalidOperation as exc:
            logger.debug("Could not convert %r to a decimal", val)
            raise InvalidNumberError(f"Invalid number: {val!r}") from exc
    else:
        raise InvalidNumberError(f"Invalid number: {val!r}")

    if not number.is_finite():
        raise InvalidNumberError(f"Invalid number: {val!r}")
    if abs(number.adjusted()) > MAX_DECIMAL_EXPONENT:
        raise InvalidNumberError(f"Number out of range: {val!r}")
    return number


def to_plain_string(number: Decimal) -> str:
    """Render a Decimal in plain notation without trailing fractional zeros."""
    if number.is_zero():
        return "0"
    return format(number.normalize(EXACT_CONTEXT), "f")


def to_safe_value(val: Numberish) -> str:
    """Convert a number to a fixed-point string the renderer can handle.

    Digits past ``NUMERAL_DECIMAL_LIMIT`` are truncated. The result is for
    display only, so the lost precision does not matter.
    """
    number = bn(val).quantize(_SAFE_QUANTUM, rounding=ROUND_DOWN, context=EXACT_CONTEXT)
    return format(number, "f")


def safe_sum(amounts: Iterable[Numberish]) -> str:
    """Sum numbers with exact decimal addition.

    Returns:
        The total as a plain decimal string, e.g. ``"0.3"`` for
        ``["0.1", "0.2"]``.
    """
    total = Decimal(0)
    for amount in amounts:
        total = EXACT_CONTEXT.add(total, bn(amount))
    return to_plain_string(total)


def reject_invalid_keystroke(key: str) -> bool:
    """Return True when a key must be blocked from a numeric input field."""
    rejected = key in INVALID_NUMBER_INPUT_KEYS
    if rejected:
        logger.debug("Blocking %r in numeric input", key)
    return rejected


def is_zero(amount: Numberish) -> bool:
    return bn(amount).is_zero()


def is_less_than_threshold(
    value: Numberish,
    threshold: Numberish = AMOUNT_LOWER_THRESHOLD,
) -> bool:
    """True for nonzero values whose magnitude is below ``threshold``.

    Zero is never "small", so it renders as a number instead of a label.
    """
    number = bn(value)
    return not number.is_zero() and number.copy_abs() < bn(threshold)


def is_small_amount(value: Numberish) -> bool:
    return is_less_than_threshold(value, AMOUNT_LOWER_THRESHOLD)


def is_more_than_threshold(value: Numberish, threshold: Numberish) -> bool:
    """True for nonzero values at or above ``threshold``."""
    number = bn(value)
    return not number.is_zero() and number >= bn(threshold)


def is_small_percentage(
    value: Numberish,
    *,
    is_percentage: bool = False,
    threshold: Numberish = PERCENTAGE_LOWER_THRESHOLD,
) -> bool:
    """True for nonzero percentages below ``threshold``.

    Values are fractions (0.10 is 10%). With ``is_percentage`` the value is
    already in percentage points and is divided by 100 first, so ``"10"``
    is compared as 0.10.
    """
    number = bn(value)
    if is_percentage:
        number = number.scaleb(-2, EXACT_CONTEXT)
    return not number.is_zero() and number < bn(threshold)


def requires_three_decimals(value: Numberish) -> bool:
    """Small fiat amounts between 0.001 and 0.009 keep a third decimal."""
    number = bn(value)
    return not number.is_zero() and FIAT_3_DECIMALS_MIN <= number <= FIAT_3_DECIMALS_MAX


def is_negligible(value: Numberish) -> bool:
    """True for nonzero dust amounts at or below ``BN_LOWER_THRESHOLD``.

    The magnitude is compared, so tiny negative amounts are dust too and
    zero never is.
    """
    number = bn(value)
    return not number.is_zero() and number.copy_abs() <= BN_LOWER_THRESHOLD


__all__ = [
    "EXACT_CONTEXT",
    "bn",
    "is_less_than_threshold",
    "is_more_than_threshold",
    "is_negligible",
    "is_small_amount",
    "is_small_percentage",
    "is_zero",
    "reject_invalid_keystroke",
    "requires_three_decimals",
    "safe_sum",
    "to_plain_string",
    "to_safe_value",
]

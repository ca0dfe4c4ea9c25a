"""Display formatting for integers, fiat amounts, token balances and percentages."""

from __future__ import annotations

import logging
from typing import Optional, Union

from numfmt.config import load_settings
from numfmt.constants import (
    FIAT_CENTS_THRESHOLD,
    FIAT_FORMAT,
    FIAT_FORMAT_3_DECIMALS,
    FIAT_FORMAT_A,
    FIAT_FORMAT_WITHOUT_DECIMALS,
    INTEGER_FORMAT,
    PERCENTAGE_FORMAT,
    PERCENTAGE_LOWER_THRESHOLD,
    PERCENTAGE_OVERFLOW_LABEL,
    PERCENTAGE_UPPER_THRESHOLD,
    TOKEN_BIG_THRESHOLD,
    TOKEN_DUST_LABEL,
    TOKEN_DUST_THRESHOLD,
    TOKEN_FORMAT,
    TOKEN_FORMAT_A,
    TOKEN_FORMAT_A_BIG,
    TOKEN_LOWER_THRESHOLD,
    TOKEN_SMALL_LABEL,
)
from numfmt.errors import UnsupportedFormatError
from numfmt.numbers import (
    EXACT_CONTEXT,
    bn,
    is_more_than_threshold,
    is_small_amount,
    is_small_percentage,
    requires_three_decimals,
    to_plain_string,
    to_safe_value,
)
from numfmt.patterns import render
from numfmt.types import FormatOptions, NumberFormat, Numberish

logger = logging.getLogger(__name__)


def fnum(
    format: Union[NumberFormat, str],
    val: Numberish,
    opts: Optional[FormatOptions] = None,
) -> str:
    """Format a number for display.

    Args:
        format: One of ``fiat``, ``integer``, ``percentage`` or ``token``.
        val: The number to format.
        opts: Formatting options; ``abbreviated`` defaults to True.

    Raises:
        UnsupportedFormatError: If the format is not implemented.
        InvalidNumberError: If ``val`` is not a valid number.
    """
    try:
        kind = NumberFormat(format)
    except ValueError as exc:
        raise UnsupportedFormatError(f"Number format not implemented: {format!r}") from exc

    opts = opts or FormatOptions()
    if kind is NumberFormat.FIAT:
        return fiat_format(val, opts)
    if kind is NumberFormat.INTEGER:
        return integer_format(val)
    if kind is NumberFormat.PERCENTAGE:
        return percentage_format(val)
    if kind is NumberFormat.TOKEN:
        return token_format(val, opts)
    raise UnsupportedFormatError(f"Number format not implemented: {kind.value!r}")


def integer_format(val: Numberish) -> str:
    """Grouped whole number; amounts below 0.001 show as ``0``."""
    if is_small_amount(val):
        return "0"
    return render(INTEGER_FORMAT, to_safe_value(val))


def fiat_format(val: Numberish, opts: Optional[FormatOptions] = None) -> str:
    """Format a fiat value.

    Amounts below 0.001 get the small amount label and amounts up to 0.009
    keep three decimals. Otherwise two decimals are shown, abbreviated with
    k/m/b/t by default. Without abbreviation, amounts of 100,000 or more
    drop their cents.
    """
    opts = opts or FormatOptions()
    if is_small_amount(val):
        return load_settings().small_amount_label
    if requires_three_decimals(val):
        return render(FIAT_FORMAT_3_DECIMALS, to_safe_value(val))

    if opts.abbreviated:
        pattern = FIAT_FORMAT_A
    elif is_more_than_threshold(bn(val).copy_abs(), FIAT_CENTS_THRESHOLD):
        pattern = FIAT_FORMAT_WITHOUT_DECIMALS
    else:
        pattern = FIAT_FORMAT
    return render(pattern, to_safe_value(val))


def token_format(val: Numberish, opts: Optional[FormatOptions] = None) -> str:
    """Format a token balance.

    Two label tiers hide dust: ``< 0.00001`` (inclusive) and ``< 0.0001``
    (exclusive). Abbreviated balances of 1000 or more keep two decimals,
    everything else up to four.
    """
    opts = opts or FormatOptions()
    number = bn(val)

    if not number.is_zero() and number <= TOKEN_DUST_THRESHOLD:
        return TOKEN_DUST_LABEL
    if not number.is_zero() and number < TOKEN_LOWER_THRESHOLD:
        return TOKEN_SMALL_LABEL

    if not opts.abbreviated:
        pattern = TOKEN_FORMAT
    elif number >= TOKEN_BIG_THRESHOLD:
        pattern = TOKEN_FORMAT_A_BIG
    else:
        pattern = TOKEN_FORMAT_A
    return render(pattern, to_safe_value(number))


def percentage_format(
    val: Numberish,
    *,
    is_percentage: bool = False,
    below_threshold_label: Optional[str] = None,
    lower_threshold: Numberish = PERCENTAGE_LOWER_THRESHOLD,
    upper_threshold: Numberish = PERCENTAGE_UPPER_THRESHOLD,
) -> str:
    """Format a percentage given as a fraction (0.10 is 10%).

    - Values above ``upper_threshold`` are likely nonsensical and show as ``-``.
      The raw value is compared, not the value in percentage points.
    - Nonzero values below ``lower_threshold`` show ``below_threshold_label``
      so the string length stays predictable.
    - ``is_percentage`` marks values already in percentage points, so
      ``"10"`` renders as ``10%``.
    """
    number = bn(val)
    if number > bn(upper_threshold):
        logger.debug("Percentage %s exceeds %s, hiding it", val, upper_threshold)
        return PERCENTAGE_OVERFLOW_LABEL

    if is_small_percentage(number, is_percentage=is_percentage, threshold=lower_threshold):
        if below_threshold_label is None:
            return load_settings().small_percentage_label
        return below_threshold_label

    if is_percentage:
        number = number.scaleb(-2, EXACT_CONTEXT)
    return render(PERCENTAGE_FORMAT, to_plain_string(number))


__all__ = [
    "fiat_format",
    "fnum",
    "integer_format",
    "percentage_format",
    "token_format",
]

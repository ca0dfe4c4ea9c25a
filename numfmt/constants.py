"""Thresholds, labels and display patterns shared by the formatters."""

from __future__ import annotations

from decimal import Decimal

MAX_UINT256 = 2**256 - 1

# Do not display percentage values greater than this amount; they are likely to be nonsensical.
PERCENTAGE_UPPER_THRESHOLD = Decimal("1000000")
PERCENTAGE_LOWER_THRESHOLD = Decimal("0.0001")
SMALL_PERCENTAGE_LABEL = "<0.01%"
PERCENTAGE_OVERFLOW_LABEL = "-"

# Dust: values at or below this amount are treated as negligible
BN_LOWER_THRESHOLD = Decimal("0.000001")

# Display <0.001 for small amounts
AMOUNT_LOWER_THRESHOLD = Decimal("0.001")
SMALL_AMOUNT_LABEL = "<0.001"

# Fiat values at or above this amount are shown without cents
FIAT_CENTS_THRESHOLD = Decimal("100000")

# Small fiat amounts in this range keep a third decimal
FIAT_3_DECIMALS_MIN = Decimal("0.001")
FIAT_3_DECIMALS_MAX = Decimal("0.009")

TOKEN_DUST_THRESHOLD = Decimal("0.00001")
TOKEN_DUST_LABEL = "< 0.00001"
TOKEN_LOWER_THRESHOLD = Decimal("0.0001")
TOKEN_SMALL_LABEL = "< 0.0001"
TOKEN_BIG_THRESHOLD = Decimal("1000")

# Fractional digits kept when handing values to the pattern renderer
NUMERAL_DECIMAL_LIMIT = 9

# Inputs whose magnitude lies beyond 10**±MAX_DECIMAL_EXPONENT are rejected
MAX_DECIMAL_EXPONENT = 10_000

INVALID_NUMBER_INPUT_KEYS = frozenset({"+", "-", "e", "E"})

# Display patterns
INTEGER_FORMAT = "0,0"
FIAT_FORMAT_A = "0,0.00a"
FIAT_FORMAT_3_DECIMALS = "0,0.000a"
FIAT_FORMAT = "0,0.00"
FIAT_FORMAT_WITHOUT_DECIMALS = "0,0"
TOKEN_FORMAT_A = "0,0.[0000]a"
TOKEN_FORMAT_A_BIG = "0,0.[00]a"
TOKEN_FORMAT = "0,0.[0000]"
PERCENTAGE_FORMAT = "0,0.[00]%"

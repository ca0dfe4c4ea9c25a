"""Shared types for number formatting."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

Numberish = Union[int, float, str, Decimal]


class NumberFormat(Enum):
    """Supported number formats."""

    FIAT = "fiat"
    INTEGER = "integer"
    PERCENTAGE = "percentage"
    TOKEN = "token"


@dataclass(frozen=True)
class FormatOptions:
    """Options accepted by the fiat and token formats."""

    abbreviated: bool = True

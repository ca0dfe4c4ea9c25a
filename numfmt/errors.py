"""Exceptions raised by the number formatters."""

from __future__ import annotations


class NumberFormatError(ValueError):
    """Base exception for number formatting errors."""


class InvalidNumberError(NumberFormatError):
    """A value could not be converted to a decimal number."""


class UnsupportedFormatError(NumberFormatError):
    """The requested number format is not implemented."""

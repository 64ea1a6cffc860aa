"""Error types raised by the converter.

Every error carries the message shown to the user and the process exit
code; the CLI is the only place that turns them into output.
"""
from __future__ import annotations


class ConversionError(Exception):
    """Base class for every user-facing failure."""

    exit_code: int = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(ConversionError):
    """Wrong number of command-line arguments."""

    def __init__(self, program: str):
        super().__init__(f"Usage: {program} <rateMin> <rateMax> <amount>")
        self.program = program


class ParseError(ConversionError):
    """An argument is not a finite real number."""

    def __init__(self, name: str, text: str):
        super().__init__(f"Error: {name} must be a number, got '{text}'.")
        self.name = name
        self.text = text


class ValidationError(ConversionError):
    pass


class InvalidRange(ValidationError):
    def __init__(self, rate_min: float, rate_max: float):
        super().__init__("Error: rateMax must be greater than rateMin.")
        self.rate_min = rate_min
        self.rate_max = rate_max


class InvalidAmount(ValidationError):
    def __init__(self, amount: float):
        super().__init__("Error: amount must be positive and greater than zero.")
        self.amount = amount


class ReportFormatError(ConversionError):
    """Captured output does not contain both report lines."""


class ConversionOverflow(ConversionError):
    """The converted amount is too large to represent as a float."""

    def __init__(self, amount: float, rate: float):
        super().__init__("Error: converted amount is too large to represent.")
        self.amount = amount
        self.rate = rate

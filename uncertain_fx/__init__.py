"""Randomized conversion: sample a uniform rate within bounds and apply it to an amount."""
from .converter import (
    ConversionRequest,
    ConversionResult,
    ConversionSummary,
    convert,
    parse_request,
    simulate,
    validate,
)
from .errors import (
    ConversionError,
    ConversionOverflow,
    InvalidAmount,
    InvalidRange,
    ParseError,
    ReportFormatError,
    UsageError,
    ValidationError,
)
from .random_source import RandomSource, make_random_source
from .rate_sampling import sample_rate, sample_rates
from .report import format_report, parse_report

__version__ = "1.0.0"

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .errors import ConversionOverflow, InvalidAmount, InvalidRange, ParseError, UsageError
from .random_source import RandomSource
from .rate_sampling import sample_rate, sample_rates

logger = logging.getLogger(__name__)

ARG_NAMES = ("rateMin", "rateMax", "amount")


@dataclass(frozen=True)
class ConversionRequest:
    rate_min: float
    rate_max: float
    amount: float


@dataclass(frozen=True)
class ConversionResult:
    sampled_rate: float
    converted_amount: float


@dataclass(frozen=True)
class ConversionSummary:
    """Statistics over many independent conversions of one request."""
    samples: int
    mean_rate: float
    mean_amount: float
    std_amount: float
    p05_amount: float
    p50_amount: float
    p95_amount: float


def _parse_number(name: str, text: str) -> float:
    #float() also takes "1_000"; digit grouping is not accepted here
    if "_" in text:
        raise ParseError(name, text)
    try:
        value = float(text.strip())
    except ValueError:
        raise ParseError(name, text) from None
    if not math.isfinite(value):
        raise ParseError(name, text)
    return value


def parse_request(args: Sequence[str], program: str = "uncertain-fx") -> ConversionRequest:
    """Build a request from exactly three textual arguments.

    Raises UsageError on a wrong argument count and ParseError when an
    argument is not a finite number. Text is never silently read as zero.
    """
    if len(args) != len(ARG_NAMES):
        raise UsageError(program)
    rate_min, rate_max, amount = (_parse_number(n, a) for n, a in zip(ARG_NAMES, args))
    return ConversionRequest(rate_min=rate_min, rate_max=rate_max, amount=amount)


def validate(request: ConversionRequest) -> None:
    if request.rate_max <= request.rate_min:
        raise InvalidRange(request.rate_min, request.rate_max)
    if request.amount <= 0:
        raise InvalidAmount(request.amount)


def convert(request: ConversionRequest, random_source: RandomSource) -> ConversionResult:
    validate(request)
    rate = sample_rate(request.rate_min, request.rate_max, random_source)
    converted = request.amount * rate
    if not math.isfinite(converted):
        raise ConversionOverflow(request.amount, rate)
    result = ConversionResult(sampled_rate=rate, converted_amount=converted)
    logger.debug("Converted %s -> %s", request, result)
    return result


def simulate(request: ConversionRequest, random_source: RandomSource, samples: int = 10_000) -> ConversionSummary:
    """
    Repeat the conversion ``samples`` times and summarise the spread.

    Parameters
    ----------
    request : Validated conversion request
    random_source : Uniform [0, 1) source supporting ``random(size)``
    samples : Number of draws, must be positive

    Returns
    -------
    ConversionSummary with the mean rate and amount statistics
    """
    validate(request)
    if isinstance(samples, bool) or not isinstance(samples, (int, np.integer)) or samples < 1:
        raise ValueError(f"samples must be a positive integer, got {samples!r}")

    rates = sample_rates(request.rate_min, request.rate_max, random_source, int(samples))
    with np.errstate(over="ignore"):
        amounts = request.amount * rates
    if not np.all(np.isfinite(amounts)):
        raise ConversionOverflow(request.amount, float(rates.max()))
    p05, p50, p95 = np.percentile(amounts, [5, 50, 95])
    return ConversionSummary(
        samples=int(samples),
        mean_rate=float(rates.mean()),
        mean_amount=float(amounts.mean()),
        std_amount=float(amounts.std()),
        p05_amount=float(p05),
        p50_amount=float(p50),
        p95_amount=float(p95),
    )

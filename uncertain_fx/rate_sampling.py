"""Uniform sampling of conversion rates.

Rates are drawn from the half-open interval [rate_min, rate_max). The
upper bound is never returned, even by a source that yields exactly 1.0
or when floating-point rounding lands on it.
"""
from __future__ import annotations

import numpy as np

from .errors import InvalidRange
from .random_source import RandomSource


def _check_bounds(rate_min: float, rate_max: float) -> None:
    if not rate_max > rate_min:
        raise InvalidRange(rate_min, rate_max)


def _below_upper(rate_max: float, rate_min: float) -> float:
    #Largest float strictly below rate_max
    return float(np.nextafter(rate_max, rate_min))


def sample_rate(rate_min: float, rate_max: float, random_source: RandomSource) -> float:
    """
    Draw a single conversion rate.

    Parameters
    ----------
    rate_min : Lower bound, inclusive
    rate_max : Upper bound, exclusive
    random_source : Object whose ``random()`` returns u in [0, 1)

    Returns
    -------
    (1 - u) * rate_min + u * rate_max, kept within [rate_min, rate_max)
    """
    _check_bounds(rate_min, rate_max)
    u = float(random_source.random())
    if not 0.0 <= u <= 1.0:
        raise ValueError(f"random source returned {u}, expected a value in [0, 1)")

    #Weighted form: rate_max - rate_min can overflow for wide finite bounds
    rate = (1.0 - u) * rate_min + u * rate_max
    if rate >= rate_max:
        rate = _below_upper(rate_max, rate_min)
    return max(rate, rate_min)


def sample_rates(
        rate_min: float,
        rate_max: float,
        random_source: RandomSource,
        size: int
) -> np.ndarray:
    """
    Vectorized ``sample_rate``: draw ``size`` independent rates.

    Parameters
    ----------
    rate_min : Lower bound, inclusive
    rate_max : Upper bound, exclusive
    random_source : Object whose ``random(size)`` returns an array in [0, 1)
    size : Number of draws

    Returns
    -------
    1D array of rates, every element in [rate_min, rate_max)
    """
    _check_bounds(rate_min, rate_max)
    if size < 1:
        raise ValueError(f"size must be a positive integer, got {size}")

    u = np.asarray(random_source.random(size), dtype=float).reshape(-1)
    if u.shape[0] != size:
        raise ValueError(f"random source returned {u.shape[0]} values, expected {size}")
    if not np.all((u >= 0.0) & (u <= 1.0)):
        raise ValueError("random source returned values outside [0, 1)")

    rates = (1.0 - u) * rate_min + u * rate_max
    rates = np.where(rates >= rate_max, _below_upper(rate_max, rate_min), rates)
    return np.maximum(rates, rate_min)

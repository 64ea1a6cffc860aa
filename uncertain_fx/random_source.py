"""Random number sources for rate sampling.

The converter never touches global RNG state. A source is any object with
a ``random(size=None)`` method returning floats in [0, 1), which is exactly
what ``numpy.random.Generator`` provides, so a Generator is the default
and tests can pass a stub returning a fixed value.

code-block: python

    from uncertain_fx.random_source import make_random_source

    #Non-deterministic, seeded once at process start
    rng = make_random_source()

    #Reproducible runs
    rng = make_random_source(seed=42)
"""
from __future__ import annotations

import logging
import time
from typing import Optional, Protocol, Union

import numpy as np

logger = logging.getLogger(__name__)

ArrayLike = Union[float, np.ndarray]


class RandomSource(Protocol):
    """Uniform draw in [0, 1)."""

    def random(self, size: Optional[int] = None) -> ArrayLike:
        ...


def fresh_seed() -> int:
    """Build a seed from OS entropy mixed with the current time.

    ``SeedSequence()`` with no argument pulls entropy from the OS; the
    wall clock is folded in so two processes started from a cloned
    environment still diverge.
    """
    seq = np.random.SeedSequence([np.random.SeedSequence().entropy, time.time_ns()])
    return int(seq.generate_state(1, dtype=np.uint64)[0])


def make_random_source(seed: Optional[int] = None) -> np.random.Generator:
    """Create the process random source.

    seed: integer seed for reproducible output. When omitted a fresh
    non-deterministic seed is used.
    """
    if seed is None:
        seed = fresh_seed()
    if seed < 0:
        raise ValueError(f"seed must be non-negative, got {seed}")
    logger.debug("Seeding random source with %d", seed)
    return np.random.default_rng(seed)

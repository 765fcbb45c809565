#!/usr/bin/env python3
"""
Random source used by every model that samples at creation time.

Models never call a global RNG. They take a source with a numpy-style
``uniform(low, high)`` method, normally a ``numpy.random.Generator`` built from
the run's master seed, so a scene can be replayed exactly.
"""
from typing import Optional, Protocol, Tuple

import numpy as np


class RandomSource(Protocol):
    def uniform(self, low: float, high: float) -> float: ...


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the master generator. A None seed draws fresh OS entropy."""
    return np.random.default_rng(seed)


def sample(rng: RandomSource, bounds: Tuple[float, float]) -> float:
    """Draw uniformly from the half-open range [low, high)."""
    low, high = bounds
    return float(rng.uniform(low, high))

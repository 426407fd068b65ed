"""Seedable random number generators."""

from __future__ import annotations

import bisect
import itertools
import random
from collections.abc import Sequence


class UniformRandomGenerator:
    """Uniform reals in ``[lbound, ubound)``."""

    def __init__(self, lbound: float = 0.0, ubound: float = 1.0, seed: int | None = None) -> None:
        self.lbound = lbound
        self.ubound = ubound
        self._rng = random.Random(seed)

    def _one(self) -> float:
        return self.lbound + (self.ubound - self.lbound) * self._rng.random()

    def get(self, n: int | None = None) -> float | list[float]:
        """One value, or a list of ``n`` values."""
        if n is None:
            return self._one()
        return [self._one() for _ in range(n)]


class GaussRandomGenerator:
    """Normally distributed reals."""

    def __init__(self, mean: float, stddev: float, seed: int | None = None) -> None:
        self.mean = mean
        self.stddev = stddev
        self._rng = random.Random(seed)

    def _one(self) -> float:
        return self._rng.gauss(self.mean, self.stddev)

    def get(self, n: int | None = None) -> float | list[float]:
        """One value, or a list of ``n`` values."""
        if n is None:
            return self._one()
        return [self._one() for _ in range(n)]


class CustomProbabilityGenerator:
    """Indices drawn according to given probabilities."""

    def __init__(self, probabilities: Sequence[float], seed: int | None = None) -> None:
        self._cumulative = list(itertools.accumulate(probabilities))
        self._uniform = UniformRandomGenerator(0.0, 1.0, seed)

    def _one(self) -> int:
        r = self._uniform.get()
        index = bisect.bisect_right(self._cumulative, r)
        if index == len(self._cumulative):
            raise ValueError("probabilities do not cover the drawn value")
        return index

    def get(self, n: int | None = None) -> int | list[int]:
        """One index, or a list of ``n`` indices."""
        if n is None:
            return self._one()
        return [self._one() for _ in range(n)]
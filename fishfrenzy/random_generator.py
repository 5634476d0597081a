"""Uniform random numbers over a fixed range."""

from __future__ import annotations

import random
from typing import Optional, Union

Number = Union[int, float]


class RandomGenerator:
    """Draws uniform values in [low, high].

    Integer bounds give integers with both ends included; any float bound
    gives floats.
    """

    def __init__(self, low: Number, high: Number, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)
        self.set_range(low, high)

    def set_range(self, low: Number, high: Number) -> None:
        if low > high:
            raise ValueError(f"empty range: {low} > {high}")
        self.low = low
        self.high = high
        self.integral = all(isinstance(v, int) and not isinstance(v, bool) for v in (low, high))

    def generate(self) -> Number:
        if self.integral:
            return self._rng.randint(self.low, self.high)
        return self._rng.uniform(self.low, self.high)

    def generate_n(self, count: int) -> list[Number]:
        return [self.generate() for _ in range(count)]
"""Pseudo-random numbers from a multiply-with-carry engine."""

from __future__ import annotations

import time

_MULTIPLIER = 1967773755
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


class MultiplyWithCarry:
    """Multiply-with-carry generator producing 32-bit unsigned integers."""

    min = 0
    max = _MASK32

    def __init__(self, seed: int = 0) -> None:
        self._x = 1
        self.seed(seed)

    def seed(self, value: int = 0) -> None:
        """Reset the state; a seed of zero behaves like a seed of one."""
        value &= _MASK32
        self._x = value if value else 1

    def __call__(self) -> int:
        self._x = (_MULTIPLIER * (self._x & _MASK32) + (self._x >> 32)) & _MASK64
        return self._x & _MASK32

    def below(self, span: int) -> int:
        """Return a uniformly distributed integer in [0, span)."""
        if span <= 0:
            raise ValueError("span must be positive")
        words = 1
        while (1 << (32 * words)) < span:
            words += 1
        total = 1 << (32 * words)
        limit = total - total % span
        while True:
            value = 0
            for _ in range(words):
                value = (value << 32) | self()
            if value < limit:
                return value % span

    def unit(self) -> float:
        """Return a float in [0, 1)."""
        return self() / (1 << 32)


_engine = MultiplyWithCarry(int(time.time()))


def random_int(low: int, high: int) -> int:
    """Return a random integer in the closed interval [low, high]."""
    if low > high:
        raise ValueError("low must not exceed high")
    return low + _engine.below(high - low + 1)


def random_float(low: float, high: float) -> float:
    """Return a random float in the half-open interval [low, high)."""
    if low > high:
        raise ValueError("low must not exceed high")
    result = low + (high - low) * _engine.unit()
    return min(result, high) if high > low else low


def random_dev(middle: float, deviation: float) -> float:
    """Return a random float in [middle - deviation, middle + deviation)."""
    if deviation < 0:
        raise ValueError("deviation must not be negative")
    return random_float(middle - deviation, middle + deviation)


def set_random_seed(seed: int) -> None:
    """Reseed the module's global engine."""
    _engine.seed(seed)
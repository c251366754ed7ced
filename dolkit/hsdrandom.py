"""Linear congruential pseudo-random generator with a 32-bit state."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MULTIPLIER = 214013
_INCREMENT = 2531011


def _to_s32(value: int) -> int:
    value &= _MASK32
    return value - 0x100000000 if value & 0x80000000 else value


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


class HsdRandom:
    """A generator whose state advances as seed * 214013 + 2531011 (mod 2**32)."""

    def __init__(self, seed: int = 1) -> None:
        self.seed = seed & _MASK32

    def _step(self) -> int:
        self.seed = (self.seed * _MULTIPLIER + _INCREMENT) & _MASK32
        return self.seed >> 16

    def rand(self) -> int:
        """Advance the state and return its upper 16 bits (0..65535)."""
        return self._step()

    def randf(self) -> float:
        """Advance the state and return a float in [0, 1)."""
        return self._step() / 65536

    def randi(self, max_val: int) -> int:
        """Advance the state and return an integer scaled into [0, max_val)."""
        product = _to_s32(max_val * self._step())
        return _trunc_div(product, 0x10000)
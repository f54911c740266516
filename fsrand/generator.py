"""A small seedable pseudo-random generator with assorted distributions."""

import math

from .tables import NORMAL_CENTRAL, NORMAL_FAR_TAIL, NORMAL_TAIL, interpolate

_MASK = (1 << 64) - 1
_INITIAL = 0x947B19E3FD46B7A5
_MULTIPLIER = 0x681AC9427D5FE8B3
_TWO_64 = 18446744073709551616.0
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_U64_MAX_F = float(0xFFFFFFFFFFFFFFFF)
_I64_MAX_F = float(0x7FFFFFFFFFFFFFFF)
_I64_MIN_F = float(_INT64_MIN)
_TRI_SCALE = 13043817825000000000.0


def _floor_int(value: float) -> int:
    return int(math.floor(value))


def _clamp64(value: int) -> int:
    return max(_INT64_MIN, min(_INT64_MAX, value))


def _round_half_away(value: float) -> int:
    if value >= 0:
        return int(math.floor(value + 0.5))
    return int(math.ceil(value - 0.5))


def _log(value: float) -> float:
    return math.log(value) if value > 0 else -math.inf


class Generator:
    """Deterministic 64-bit generator; the same seed yields the same stream."""

    def __init__(self, seed: int = 0) -> None:
        self._prev = _INITIAL
        self._state = 0
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Restart the stream from ``seed`` (taken modulo 2**64)."""
        self._prev = _INITIAL
        self._state = seed & _MASK

    # Uniform

    def next_u64(self) -> int:
        """Uniform integer from 0 to 2**64 - 1."""
        prev = self._prev
        self._prev = ((prev + (prev >> 1) + self._state) * _MULTIPLIER) & _MASK
        self._state = (self._state + 1) & _MASK
        return self._prev

    def int_range(self, low: int, count: int) -> int:
        """Uniform integer from ``low`` with ``count`` possible outcomes."""
        if count <= 0:
            raise ValueError(f"count must be positive, got {count!r}")
        return low + self.next_u64() % count

    def int_between(self, low: int, high: int) -> int:
        """Uniform integer from ``low`` to ``high`` inclusive."""
        if high < low:
            raise ValueError(f"high ({high!r}) is below low ({low!r})")
        return self.int_range(low, high - low + 1)

    def random(self) -> float:
        """Uniform float in [0, 1]."""
        return self.next_u64() / _TWO_64

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self.random()

    def uniform_range(self, low: float, width: float) -> float:
        return low + width * self.random()

    # Linearly increasing density

    def increasing(self) -> float:
        return math.sqrt(self.random())

    def increasing_between(self, low: float, high: float) -> float:
        return low + (high - low) * math.sqrt(self.random())

    def increasing_range(self, low: float, width: float) -> float:
        return low + width * math.sqrt(self.random())

    def increasing_int(self) -> int:
        value = _U64_MAX_F * math.sqrt(self.random()) - _I64_MAX_F
        return _clamp64(_floor_int(value))

    def increasing_int_between(self, low: float, high: float) -> int:
        return _floor_int(self.increasing_between(low, high))

    def increasing_int_range(self, low: float, width: float) -> int:
        return _floor_int(self.increasing_range(low, width))

    # Linearly decreasing density

    def decreasing(self) -> float:
        return 1.0 - math.sqrt(self.random())

    def decreasing_between(self, low: float, high: float) -> float:
        return high - (high - low) * math.sqrt(self.random())

    def decreasing_range(self, low: float, width: float) -> float:
        return low + width - width * math.sqrt(self.random())

    def decreasing_int(self) -> int:
        value = _I64_MAX_F - _U64_MAX_F * math.sqrt(self.random())
        return _clamp64(_floor_int(value))

    def decreasing_int_between(self, low: float, high: float) -> int:
        return _floor_int(self.decreasing_between(low, high))

    def decreasing_int_range(self, low: float, width: float) -> int:
        return _floor_int(self.decreasing_range(low, width))

    # Triangular

    def triangular(self) -> float:
        """Triangular float on [0, 1] with mode 0.5."""
        x = self.random()
        if x < 0.5:
            return math.sqrt(x * 0.5)
        return 1.0 - math.sqrt((1.0 - x) * 0.5)

    def _triangular_parts(self, low: float, high: float, mode: float) -> tuple[bool, float]:
        x = self.random()
        width = high - low
        if x < (mode - low) / width:
            return True, low + math.sqrt(x * width * (mode - low))
        return False, high - math.sqrt((1.0 - x) * width * (high - mode))

    def triangular_between(self, low: float, high: float, mode: float) -> float:
        return self._triangular_parts(low, high, mode)[1]

    def triangular_range(self, low: float, width: float, mode: float) -> float:
        return self._triangular_parts(low, low + width, mode)[1]

    def triangular_int(self) -> int:
        """Triangular integer across the signed 64-bit range."""
        x = self.random()
        if x < 0.5:
            value = _I64_MIN_F + math.sqrt(x) * _TRI_SCALE
        else:
            value = _I64_MAX_F - math.sqrt(1.0 - x) * _TRI_SCALE
        return _clamp64(_floor_int(value))

    def triangular_int_between(self, low: float, high: float, mode: float) -> int:
        """Triangular integer, truncated toward zero."""
        return int(self._triangular_parts(low, high, mode)[1])

    def triangular_int_range(self, low: float, width: float, mode: float) -> int:
        """Triangular integer: lower side truncated, upper side floored."""
        rising, value = self._triangular_parts(low, low + width, mode)
        return int(value) if rising else _floor_int(value)

    # Normal

    def _standard_normal(self) -> float:
        p = self.random()
        if p <= 0.5:
            if p > 0.01:
                return 0.0 - interpolate(NORMAL_CENTRAL, (0.5 - p) * 200.0)
            if p >= 0.0001:
                return 0.0 - interpolate(NORMAL_TAIL, (0.01 - p) * 10000.0)
            return 0.0 - interpolate(NORMAL_FAR_TAIL, (0.0001 - p) * 1000000.0)
        if p <= 0.99:
            return interpolate(NORMAL_CENTRAL, (p - 0.5) * 200.0)
        if p <= 0.9999:
            return interpolate(NORMAL_TAIL, (p - 0.99) * 10000.0)
        return interpolate(NORMAL_FAR_TAIL, (p - 0.9999) * 1000000.0)

    def normal(self, mean: float = 0.0, sd: float = 1.0) -> float:
        return mean + self._standard_normal() * sd

    def normal_int(self, mean: float = 0.0, sd: float = 1.0) -> int:
        """Normal value rounded half away from zero."""
        return _round_half_away(self.normal(mean, sd))

    # Exponential

    def exponential(self, mean: float = 1.0) -> float:
        return -1.0 * mean * _log(self.random())

    def exponential_median(self, median: float) -> float:
        return median * math.log(0.5) * _log(self.random())

    def exponential_int(self, mean: float = 1.0) -> int:
        return _floor_int(self.exponential(mean))

    def exponential_int_median(self, median: float) -> int:
        return _floor_int(self.exponential_median(median))

    # Discrete

    def bernoulli(self, p: float = 0.5) -> int:
        return int(self.random() < p)

    def binomial(self, n: int = 1, p: float = 0.5) -> int:
        return sum(self.random() < p for _ in range(n))

    def binomial_approx(self, n: int, p: float) -> int:
        """Normal approximation to the binomial, clamped to [0, n]."""
        count = int(n * p + self._standard_normal() * math.sqrt(n * p * (1 - p)))
        return max(0, min(n, count))

    def poisson(self, mean: float = 1.0) -> int:
        limit = math.exp(-1.0 * mean)
        k = 0
        x = self.random()
        while x > limit:
            x *= self.random()
            k += 1
        return k

    def poisson_approx(self, mean: float) -> int:
        """Normal approximation to the Poisson, never negative."""
        return max(0, _round_half_away(mean + self._standard_normal() * math.sqrt(mean)))
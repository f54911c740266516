"""Statistical diagnostics for the generator: sample dumps, uniformity reports and histograms."""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
import math

from .generator import Generator

_OUTCOMES = 256
_HISTOGRAM_HEIGHT = 20
_MAX_BARS = 200


@dataclass(frozen=True)
class UniformReport:
    """Counts of the low 8 bits of ``n`` draws and of consecutive differences."""

    n: int
    outcomes: tuple[int, ...]
    differences: tuple[int, ...]
    outcome_sd: float
    difference_sd: float
    zero_deviation: float

    def format(self) -> str:
        """Render the report as plain text."""
        outcomes = "".join(f"{count} " for count in self.outcomes)
        differences = "".join(f"{count} " for count in self.differences)
        return (
            f"Probability deviation of 0 from average result: {self.zero_deviation:.20f} \n\n"
            f"Outcomes: {outcomes}\n\n"
            f"SD of outcomes: {self.outcome_sd:f}\n\n"
            f"Differences: {differences}\n\n"
            f"SD of differences: {self.difference_sd:f}\n\n"
        )


def _population_sd(counts: Sequence[int]) -> float:
    mean = sum(counts) / len(counts)
    return math.sqrt(sum((count - mean) ** 2 for count in counts) / len(counts))


def uniform_report(rng: Generator, n: int) -> UniformReport:
    """Draw ``n`` values in [0, 256) and tally outcomes and successive differences."""
    if n < 1:
        raise ValueError(f"number of samples must be at least 1, got {n!r}")
    outcomes = [0] * _OUTCOMES
    differences = [0] * _OUTCOMES
    previous = 0
    for _ in range(n):
        value = rng.int_range(0, _OUTCOMES)
        outcomes[value] += 1
        differences[(value - previous) % _OUTCOMES] += 1
        previous = value
    return UniformReport(
        n=n,
        outcomes=tuple(outcomes),
        differences=tuple(differences),
        outcome_sd=_population_sd(outcomes),
        difference_sd=_population_sd(differences),
        zero_deviation=outcomes[0] / n - 1.0 / _OUTCOMES,
    )


def sample_values(rng: Generator, n: int) -> list[int]:
    """Return ``n`` raw 64-bit draws read as signed integers."""
    return [value - (1 << 64) if value >= 1 << 63 else value for value in (rng.next_u64() for _ in range(n))]


def sample_bits(rng: Generator, n: int) -> list[str]:
    """Return ``n`` raw 64-bit draws as 64-character bit strings."""
    return [format(rng.next_u64(), "064b") for _ in range(n)]


_ALL_SAMPLERS: tuple[tuple[str, Callable[[Generator], float]], ...] = (
    ("Uniform integer from 0 to 2^64 - 1", lambda g: g.next_u64()),
    ("Uniform integer from lower to upper bound", lambda g: g.int_between(-1000, 1000)),
    ("Uniform integer given lower bound and number of possible outcomes", lambda g: g.int_range(-1000, 2000)),
    ("Uniform double from 0 to 1", lambda g: g.random()),
    ("Uniform double from lower to upper bound", lambda g: g.uniform(-1000.0, 1000.0)),
    ("Uniform double given lower bound and range of possible outcomes", lambda g: g.uniform_range(-1000.0, 2000.0)),
    ("Linearly increasing double from 0 to 1", lambda g: g.increasing()),
    ("Linearly increasing double from lower to upper bound", lambda g: g.increasing_between(-1000.0, 1000.0)),
    (
        "Linearly increasing double given lower bound and range of possible outcomes",
        lambda g: g.increasing_range(-1000.0, 2000.0),
    ),
    ("Linearly increasing integer from 2^-63 to 2^63 - 1", lambda g: g.increasing_int()),
    ("Linearly increasing integer from lower to upper bound", lambda g: g.increasing_int_between(-1000, 1000)),
    (
        "Linearly increasing integer given lower bound and number of possible outcomes",
        lambda g: g.increasing_int_range(-1000, 2000),
    ),
    ("Linearly decreasing double from 0 to 1", lambda g: g.decreasing()),
    ("Linearly decreasing double from lower to upper bound", lambda g: g.decreasing_between(-1000.0, 1000.0)),
    (
        "Linearly decreasing double given lower bound and range of possible outcomes",
        lambda g: g.decreasing_range(-1000.0, 2000.0),
    ),
    ("Linearly decreasing integer from 2^-63 to 2^63 - 1", lambda g: g.decreasing_int()),
    ("Linearly decreasing integer from lower to upper bound", lambda g: g.decreasing_int_between(-1000.0, 1000.0)),
    (
        "Linearly decreasing integer given lower bound and number of possible outcomes",
        lambda g: g.decreasing_int_range(-1000.0, 2000.0),
    ),
    ("Triangular double from 0 to 1", lambda g: g.triangular()),
    (
        "Triangular double from lower to upper bound given mode",
        lambda g: g.triangular_between(-1000.0, 1000.0, 500.0),
    ),
    (
        "Triangular double given lower bound and range of possible outcomes and mode",
        lambda g: g.triangular_range(-1000.0, 2000.0, 500.0),
    ),
    ("Triangular integer from 2^-63 to 2^63 - 1", lambda g: g.triangular_int()),
    (
        "Triangular integer from lower to upper bound given mode",
        lambda g: g.triangular_int_between(-1000.0, 1000.0, 500.0),
    ),
    (
        "Triangular integer given lower bound and number of possible outcomes and mode",
        lambda g: g.triangular_int_range(-1000.0, 2000.0, 500.0),
    ),
    ("Normal double with mean 0 and standard deviation 1", lambda g: g.normal()),
    ("Normal double given mean and standard deviation", lambda g: g.normal(10.0, 4.0)),
    ("Normal integer (rounded double) with mean 0 and standard deviation 1", lambda g: g.normal_int()),
    ("Normal integer (rounded double) given mean and standard deviation", lambda g: g.normal_int(10.0, 4.0)),
    ("Exponential double with mean 1", lambda g: g.exponential()),
    ("Exponential double given mean", lambda g: g.exponential(5.0)),
    ("Exponential double given median", lambda g: g.exponential_median(5.0)),
    ("Exponential integer with mean 1", lambda g: g.exponential_int()),
    ("Exponential integer given mean", lambda g: g.exponential_int(5.0)),
    ("Exponential integer given median", lambda g: g.exponential_int_median(5.0)),
    ("Bernoulli integer with probability of success 0.5", lambda g: g.bernoulli()),
    ("Bernoulli integer given probability of success", lambda g: g.bernoulli(0.7)),
    ("Binomial integer for 1 trial with probability of success 0.5", lambda g: g.binomial()),
    ("Binomial integer given number of trials and probability of success", lambda g: g.binomial(20, 0.7)),
    (
        "Approximate binomial integer given number of trials and probability of success",
        lambda g: g.binomial_approx(2000, 0.7),
    ),
    ("Poisson integer with mean 1", lambda g: g.poisson()),
    ("Poisson integer given 0 < mean < 600", lambda g: g.poisson(5.0)),
    ("Approximate Poisson integer given mean > 0", lambda g: g.poisson_approx(5000.0)),
)


def all_sample_values(rng: Generator, n: int) -> list[tuple[str, list[float]]]:
    """Draw ``n`` values from each distribution in turn, labelled."""
    return [(label, [sampler(rng) for _ in range(n)]) for label, sampler in _ALL_SAMPLERS]


def _format_value(value: float) -> str:
    return f"{value:f}" if isinstance(value, float) else str(value)


def format_all_sample_values(samples: Iterable[tuple[str, Sequence[float]]]) -> str:
    """Render labelled samples, one block per distribution."""
    blocks = (f"{label}: " + " ".join(_format_value(value) for value in values) for label, values in samples)
    return "\n\n".join(blocks) + "\n"


def histogram(values: Iterable[float], low: float, high: float, bars: int) -> tuple[list[int], int, int]:
    """Bin ``values`` falling in [low, high) into ``bars`` equal bins.

    Returns the bin counts, how many values were binned and how many were seen.
    """
    if not 1 <= bars <= _MAX_BARS:
        raise ValueError(
            "The histogram could not be displayed because the number of bars is out of the range 1 <= numBars <= 200."
        )
    if low >= high:
        raise ValueError(
            "The histogram could not be displayed because the lower endpoint is greater than or equal to the higher endpoint."
        )
    width = high - low
    counts = [0] * bars
    total = 0
    seen = 0
    for value in values:
        seen += 1
        if low <= value < high:
            counts[min(bars - 1, int(bars * (value - low) / width))] += 1
            total += 1
    if seen < 1:
        raise ValueError(
            "The histogram could not be displayed because the number of random values to sample is less than 1."
        )
    return counts, total, seen


def render_histogram(counts: Sequence[int], total: int, n: int, low: float, high: float) -> str:
    """Draw the bin counts as a text bar chart with a summary."""
    peak = max(counts, default=0)
    if peak == 0:
        raise ValueError("No data sampled fell within the histogram's display range.")
    bars = len(counts)
    rule = "-" * bars
    rows = [
        "|" + "".join("#" if count >= peak * (_HISTOGRAM_HEIGHT - i) / _HISTOGRAM_HEIGHT else " " for count in counts) + "|"
        for i in range(_HISTOGRAM_HEIGHT)
    ]
    summary = (
        f"{total} out of {n} sampled random values are shown here.\n"
        f"The lower end is {low:f} and the higher end is {high:f}.\n"
        f"There are {bars} bars, so each bar represents a range of values equal to {(high - low) / bars:f}.\n"
    )
    return "\n".join([rule, *rows, rule]) + "\n\n" + summary
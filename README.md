# fsrand

A small, deterministic pseudo-random number generator with a broad set of
ready-made distributions. The same seed always yields the same sequence.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Using the generator

```python
from fsrand.generator import Generator

rng = Generator(42)

rng.next_u64()                         # uniform integer in [0, 2**64 - 1]
rng.int_between(-1000, 1000)           # uniform integer, both bounds included
rng.int_range(-1000, 2000)             # uniform integer from a lower bound and a count of outcomes
rng.random()                           # uniform float in [0, 1]
rng.uniform(-1000.0, 1000.0)           # uniform float between two bounds
rng.uniform_range(-1000.0, 2000.0)     # uniform float from a lower bound and a width

rng.increasing_between(0.0, 10.0)      # density rises linearly towards the upper bound
rng.decreasing_between(0.0, 10.0)      # density falls linearly towards the upper bound
rng.triangular()                       # triangular on [0, 1] with mode 0.5
rng.triangular_between(-1000.0, 1000.0, 500.0)

rng.normal(10.0, 4.0)                  # normal with mean and standard deviation
rng.normal_int(10.0, 4.0)              # normal, rounded half away from zero
rng.exponential(5.0)                   # exponential with a given mean
rng.exponential_median(5.0)            # exponential described by its median
rng.bernoulli(0.7)                     # 1 or 0
rng.binomial(20, 0.7)                  # exact count of successes
rng.binomial_approx(2000, 0.7)         # normal approximation, clamped to [0, n]
rng.poisson(5.0)                       # exact, for 0 < mean < 600
rng.poisson_approx(5000.0)             # normal approximation, never negative
```

The increasing, decreasing and triangular families also have `*_range`
variants that take a lower bound and a width instead of two bounds, and
`*_int` variants that return integers (`increasing_int`, `decreasing_int` and
`triangular_int` span the signed 64-bit range). `exponential_int` and
`exponential_int_median` floor their exponential counterparts.

`rng.seed(n)` restarts the sequence as if the generator had just been built
with that seed. `int_range` raises `ValueError` for a count that is not
positive, and `int_between` when the upper bound is below the lower one.

Normal draws come from interpolating tables of z-scores held in
`fsrand.tables`; `interpolate(table, position)` does the linear interpolation
at a fractional index.

## Diagnostics

`fsrand.diagnostics` holds tools for inspecting the generator's quality:

- `uniform_report(rng, n)` draws `n` values in `[0, 256)` and tallies the
  outcomes and the differences between consecutive outcomes; the returned
  `UniformReport` has a `format()` method for printing.
- `sample_values(rng, n)` lists raw 64-bit draws read as signed integers, and
  `sample_bits(rng, n)` lists them as 64-character bit strings.
- `all_sample_values(rng, n)` draws `n` values from every distribution, each
  list labelled, and `format_all_sample_values(samples)` renders them as text.
- `histogram(values, low, high, bars)` bins the values that fall in
  `[low, high)` into 1 to 200 bars and returns the counts, how many were
  binned and how many were seen; `render_histogram(counts, total, n, low, high)`
  draws them as a 20-row ASCII chart with a summary. Both raise `ValueError`
  for arguments they cannot work with, or when no value fell in range.

## Command line

```
fsrand
```

draws 100000 exponential values with mean 10 and prints an ASCII histogram of
them over the range 0 to 40 in 160 bars. A mode can be given as the first
argument:

- `histogram` (the default)
- `uniform`: the uniformity report, over 100000000 draws by default
- `values`: 100 raw draws as signed integers
- `bits`: 100 raw draws as bit strings
- `all`: 50 draws from every distribution
- `specific`: 1000 exponential values

Options: `--count` sets the number of draws, `--seed` the seed (default 0),
`--mean` the mean of the exponential used by `histogram` and `specific`, and
`--low`, `--high` and `--bars` the histogram's range and number of bars. When
a diagnostic cannot be produced, the reason is printed to standard error and
the command exits with status 1. Run `fsrand --help` for the full list.
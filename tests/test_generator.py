import math
import statistics

import pytest

from fsrand.generator import Generator

N = 20000


def pair(seed=42):
    return Generator(seed), Generator(seed)


def test_same_seed_same_stream():
    a, b = pair(7)
    assert [a.next_u64() for _ in range(50)] == [b.next_u64() for _ in range(50)]


def test_different_seeds_differ():
    a, b = Generator(1), Generator(2)
    assert [a.next_u64() for _ in range(10)] != [b.next_u64() for _ in range(10)]


def test_reseed_restarts_stream():
    gen = Generator(5)
    first = [gen.next_u64() for _ in range(20)]
    gen.seed(5)
    assert [gen.next_u64() for _ in range(20)] == first


def test_negative_seed_wraps_to_unsigned():
    a, b = Generator(-1), Generator(2**64 - 1)
    assert [a.next_u64() for _ in range(10)] == [b.next_u64() for _ in range(10)]


def test_next_u64_in_range():
    gen = Generator(3)
    assert all(0 <= gen.next_u64() < 2**64 for _ in range(1000))


def test_int_between_covers_all_outcomes():
    gen = Generator(11)
    seen = {gen.int_between(0, 9) for _ in range(2000)}
    assert seen == set(range(10))


def test_int_range_bounds():
    gen = Generator(12)
    values = [gen.int_range(-1000, 2000) for _ in range(5000)]
    assert min(values) >= -1000 and max(values) <= 999


@pytest.mark.parametrize("low,count", [(0, 0), (5, -3)])
def test_int_range_rejects_empty(low, count):
    with pytest.raises(ValueError):
        Generator(0).int_range(low, count)


def test_int_between_rejects_inverted():
    with pytest.raises(ValueError):
        Generator(0).int_between(10, 5)


def test_random_is_unit_interval_with_centred_mean():
    gen = Generator(13)
    values = [gen.random() for _ in range(N)]
    assert all(0.0 <= v <= 1.0 for v in values)
    assert abs(statistics.fmean(values) - 0.5) < 0.02


def test_uniform_matches_random():
    a, b = pair()
    for _ in range(100):
        assert a.uniform(-1000.0, 1000.0) == pytest.approx(-1000.0 + 2000.0 * b.random())


def test_uniform_range_equals_uniform():
    a, b = pair()
    for _ in range(100):
        assert a.uniform_range(-3.0, 8.0) == pytest.approx(b.uniform(-3.0, 5.0))


def test_increasing_and_decreasing_mirror():
    a, b = pair(21)
    for _ in range(200):
        assert a.increasing() + b.decreasing() == pytest.approx(1.0)


def test_increasing_skews_high():
    gen = Generator(22)
    values = [gen.increasing_between(-1000.0, 1000.0) for _ in range(N)]
    assert all(-1000.0 <= v <= 1000.0 for v in values)
    assert statistics.fmean(values) > 0


def test_decreasing_skews_low():
    gen = Generator(23)
    values = [gen.decreasing_range(-1000.0, 2000.0) for _ in range(N)]
    assert all(-1000.0 <= v <= 1000.0 for v in values)
    assert statistics.fmean(values) < 0


def test_increasing_int_is_floor_of_float():
    a, b = pair(24)
    for _ in range(200):
        assert a.increasing_int_between(-1000, 1000) == math.floor(b.increasing_between(-1000, 1000))
        assert a.increasing_int_range(-1000, 2000) == math.floor(b.increasing_range(-1000, 2000))


def test_decreasing_int_is_floor_of_float():
    a, b = pair(25)
    for _ in range(200):
        assert a.decreasing_int_between(-1000, 1000) == math.floor(b.decreasing_between(-1000, 1000))
        assert a.decreasing_int_range(-1000, 2000) == math.floor(b.decreasing_range(-1000, 2000))


def test_full_range_ints_stay_in_int64():
    gen = Generator(26)
    for draw in (gen.increasing_int, gen.decreasing_int, gen.triangular_int):
        values = [draw() for _ in range(2000)]
        assert all(-(2**63) <= v <= 2**63 - 1 for v in values)


def test_increasing_int_skews_positive():
    gen = Generator(27)
    values = [gen.increasing_int() for _ in range(5000)]
    assert sum(v > 0 for v in values) > sum(v < 0 for v in values)


def test_triangular_symmetric():
    gen = Generator(31)
    values = [gen.triangular() for _ in range(N)]
    assert all(0.0 <= v <= 1.0 for v in values)
    assert abs(statistics.fmean(values) - 0.5) < 0.02


def test_triangular_between_mean_and_bounds():
    gen = Generator(32)
    values = [gen.triangular_between(-1000.0, 1000.0, 500.0) for _ in range(N)]
    assert all(-1000.0 <= v <= 1000.0 for v in values)
    assert statistics.fmean(values) == pytest.approx(500.0 / 3, abs=20.0)


def test_triangular_range_equals_between():
    a, b = pair(33)
    for _ in range(200):
        assert a.triangular_range(-1000.0, 2000.0, 500.0) == pytest.approx(
            b.triangular_between(-1000.0, 1000.0, 500.0)
        )


def test_triangular_int_between_truncates():
    a, b = pair(34)
    for _ in range(500):
        assert a.triangular_int_between(-1000.0, 1000.0, 500.0) == int(
            b.triangular_between(-1000.0, 1000.0, 500.0)
        )


def test_triangular_int_range_within_bounds():
    gen = Generator(35)
    values = [gen.triangular_int_range(-1000.0, 2000.0, 500.0) for _ in range(5000)]
    assert min(values) >= -1000 and max(values) <= 1000


def test_triangular_int_has_both_signs():
    gen = Generator(36)
    values = [gen.triangular_int() for _ in range(2000)]
    assert any(v < 0 for v in values) and any(v > 0 for v in values)


def test_standard_normal_moments_and_bounds():
    gen = Generator(41)
    values = [gen.normal() for _ in range(N)]
    assert all(-5.0 <= v <= 5.0 for v in values)
    assert abs(statistics.fmean(values)) < 0.05
    assert statistics.pstdev(values) == pytest.approx(1.0, abs=0.05)


def test_normal_scales_standard():
    a, b = pair(42)
    for _ in range(200):
        assert a.normal(10.0, 4.0) == pytest.approx(10.0 + 4.0 * b.normal())


def test_normal_int_is_nearest():
    a, b = pair(43)
    for _ in range(500):
        assert abs(a.normal_int(10.0, 4.0) - b.normal(10.0, 4.0)) <= 0.5


def test_exponential_mean():
    gen = Generator(51)
    values = [gen.exponential(5.0) for _ in range(N)]
    assert all(v >= 0 for v in values)
    assert statistics.fmean(values) == pytest.approx(5.0, rel=0.05)


def test_exponential_default_is_unit_mean_scaled():
    a, b = pair(52)
    for _ in range(200):
        assert 5.0 * a.exponential() == pytest.approx(b.exponential(5.0))


def test_exponential_int_versions_floor():
    a, b = pair(53)
    for _ in range(300):
        assert a.exponential_int(5.0) == math.floor(b.exponential(5.0))
        assert a.exponential_int_median(5.0) == math.floor(b.exponential_median(5.0))


def test_exponential_median_positive():
    gen = Generator(54)
    assert all(gen.exponential_median(5.0) >= 0 for _ in range(1000))


def test_bernoulli_extremes_and_rate():
    gen = Generator(61)
    assert all(gen.bernoulli(0.0) == 0 for _ in range(500))
    successes = sum(gen.bernoulli(0.7) for _ in range(N))
    assert successes / N == pytest.approx(0.7, abs=0.02)


def test_binomial_bounds_and_mean():
    gen = Generator(62)
    values = [gen.binomial(20, 0.7) for _ in range(5000)]
    assert all(0 <= v <= 20 for v in values)
    assert statistics.fmean(values) == pytest.approx(14.0, abs=0.3)


def test_binomial_single_trial_matches_bernoulli():
    a, b = pair(63)
    assert [a.binomial() for _ in range(300)] == [b.bernoulli() for _ in range(300)]


def test_binomial_approx_clamped():
    gen = Generator(64)
    values = [gen.binomial_approx(2000, 0.7) for _ in range(3000)]
    assert all(0 <= v <= 2000 for v in values)
    assert statistics.fmean(values) == pytest.approx(1400.0, abs=5.0)
    assert all(0 <= gen.binomial_approx(3, 0.5) <= 3 for _ in range(1000))


def test_poisson_mean():
    gen = Generator(71)
    values = [gen.poisson(5.0) for _ in range(N)]
    assert min(values) >= 0
    assert statistics.fmean(values) == pytest.approx(5.0, abs=0.15)


def test_poisson_approx_mean_and_floor():
    gen = Generator(72)
    values = [gen.poisson_approx(5000.0) for _ in range(3000)]
    assert statistics.fmean(values) == pytest.approx(5000.0, abs=10.0)
    assert all(gen.poisson_approx(0.5) >= 0 for _ in range(1000))
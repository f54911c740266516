"""Lookup tables of standard normal z-scores and linear interpolation over them."""

from collections.abc import Iterable, Sequence


def _scaled(values: Iterable[int], scale: int) -> tuple[float, ...]:
    """Turn fixed-point integers into floats by dividing by ``scale``."""
    return tuple(value / scale for value in values)


# z-scores for probabilities 0.5, 0.505, 0.51, ..., 0.995 (units of 1e-7)
NORMAL_CENTRAL: tuple[float, ...] = _scaled(
    (
        0, 125335, 250689, 376083, 501536, 627068, 752699, 878448, 1004337, 1130385,
        1256613, 1383042, 1509692, 1636585, 1763742, 1891184, 2018935, 2147016, 2275450, 2404260,
        2533471, 2663106, 2793190, 2923749, 3054808, 3186390, 3318530, 3451260, 3584590, 3718560,
        3853200, 3988550, 4124630, 4261480, 4399130, 4537620, 4676990, 4817270, 4958500, 5100730,
        5244010, 5388360, 5533850, 5680510, 5828420, 5977600, 6128130, 6280060, 6433450, 6588380,
        6744900, 6903090, 7063030, 7224790, 7388470, 7554150, 7721930, 7891920, 8064210, 8238940,
        8416210, 8596170, 8778960, 8964730, 9153650, 9345890, 9541650, 9741140, 9944580, 10152220,
        10364330, 10581220, 10803190, 11030630, 11263910,
        11503490, 11749870, 12003590, 12265280, 12535650,
        12815520, 13105790, 13407550, 13722040, 14050720,
        14395310, 14757910, 15141020, 15547740, 15981930,
        16448540, 16953980, 17506860, 18119110, 18807940,
        19599640, 20537490, 21700900, 23263480, 25758290,
    ),
    10_000_000,
)

# z-scores for probabilities 0.99, 0.9901, 0.9902, ..., 0.9999 (units of 1e-6)
NORMAL_TAIL: tuple[float, ...] = _scaled(
    (
        2326348, 2330116, 2333918, 2337754, 2341625, 2345531, 2349473, 2353452, 2357469, 2361524,
        2365618, 2369752, 2373928, 2378145, 2382404, 2386708, 2391056, 2395450, 2399890, 2404378,
        2408916, 2413503, 2418142, 2422833, 2427578, 2432379, 2437236, 2442152, 2447127, 2452164,
        2457263, 2462428, 2467658, 2472958, 2478327, 2483769, 2489286, 2494879, 2500552, 2506306,
        2512144, 2518070, 2524085, 2530192, 2536396, 2542699, 2549104, 2555616, 2562238, 2568974,
        2575829, 2582807, 2589914, 2597153, 2604531, 2612054, 2619728, 2627559, 2635554, 2643722,
        2652070, 2660607, 2669342, 2678286, 2687449, 2696844, 2706483, 2716381, 2726551, 2737012,
        2747781, 2758879, 2770327, 2782150, 2794376, 2807034, 2820158, 2833787, 2847963, 2862736,
        2878162, 2894304, 2911238, 2929050, 2947843, 2967738, 2988882, 3011454, 3035672, 3061814,
        3090232, 3121389, 3155907, 3194650, 3238880, 3290530, 3352790, 3431610, 3540080, 3719020,
    ),
    1_000_000,
)

# z-scores for probabilities 0.9999, 0.999901, 0.999902, ..., 1 (units of 1e-5)
NORMAL_FAR_TAIL: tuple[float, ...] = _scaled(
    (
        371902, 372155, 372412, 372670, 372932, 373195, 373462, 373731, 374003, 374277,
        374555, 374835, 375119, 375405, 375695, 375987, 376283, 376583, 376885, 377191,
        377501, 377815, 378132, 378453, 378778, 379107, 379440, 379778, 380119, 380466,
        380817, 381173, 381533, 381899, 382270, 382646, 383028, 383415, 383808, 384207,
        384613, 385024, 385443, 385868, 386301, 386740, 387188, 387643, 388107, 388578,
        389059, 389549, 390049, 390558, 391078, 391608, 392150, 392703, 393269, 393848,
        394440, 395046, 395668, 396304, 396958, 397629, 398318, 399026, 399756, 400507,
        401281, 402080, 402906, 403760, 404645, 405563, 406516, 407507, 408541, 409619,
        410748, 411932, 413176, 414487, 415875, 417347, 418915, 420594, 422400, 424356,
        426489, 428836, 431445, 434386, 437759, 441717, 446518, 452639, 461138, 475342,
        500000,
    ),
    100_000,
)


def interpolate(table: Sequence[float], position: float) -> float:
    """Linearly interpolate ``table`` at a fractional index.

    Positions at or beyond the last entry yield the last entry.
    """
    if position < 0:
        raise ValueError(f"position must not be negative, got {position!r}")
    index = int(position)
    if index >= len(table) - 1:
        return table[-1]
    lower = table[index]
    return lower + (position - index) * (table[index + 1] - lower)
# generator/distributions.py
# Convert raw 64-bit outputs into uniform, exponential and geometric variates.
# rng: anything with next_raw() returning an unsigned 64-bit integer.

import math

from .splitmix64 import MASK64

MAX_U64 = float(MASK64)


def uniform(rng, low, high):
    """Uniform real in the open interval (low, high)."""
    u = rng.next_raw() / MAX_U64
    # raw values near 0 or the max round onto the endpoints, draw again
    while u <= 0.0 or u >= 1.0:
        u = rng.next_raw() / MAX_U64
    return low + (high - low) * u


def exponential(rng, mean):
    """Exponential variate with the given mean, by inverse CDF."""
    if not (mean > 0 and math.isfinite(mean)):
        raise ValueError(f"exponential mean must be positive and finite, got {mean}")
    r = uniform(rng, 0.0, 1.0)
    return -mean * math.log1p(-r)


def geometric(rng, success):
    """Number of failures before the first success, P(i) = p(1-p)^i."""
    if not 0 < success < 1:
        raise ValueError(f"success probability must be in (0, 1), got {success}")
    r = uniform(rng, 0.0, 1.0)
    k = math.ceil(-1 + math.log1p(-r) / math.log1p(-success))
    # -1 + ratio rounds to -1.0 when the ratio is below double epsilon
    return max(k, 0)

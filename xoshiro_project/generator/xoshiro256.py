# generator/xoshiro256.py
# xoshiro256** / xoshiro256+ generator.
# State: four 64-bit words, never all zero.
# Update: linear transform over GF(2) (xor, shift, rotate); the two variants
# share it and only differ in how the output is read from the state.

import logging

from . import distributions
from .splitmix64 import SplitMix64, MASK64

logger = logging.getLogger('xoshiro.generator')

# equivalent to 2^128 calls to next_raw()
JUMP = (0x180ec6d33cfd0aba, 0xd5a61266f0c9392c, 0xa9582618e03fc9aa, 0x39abdc4529b1661c)
# equivalent to 2^192 calls to next_raw()
LONG_JUMP = (0x76e15d3efefdcbbf, 0xc5004e441c522fb3, 0x77710069854ee241, 0x39109bb02acbe635)


def rotl(x, k):
    if not 0 <= k < 64:
        raise ValueError(f"rotation must be in [0, 64), got {k}")
    return ((x << k) & MASK64) | (x >> (64 - k))


def starstar_output(s):
    return (rotl((s[1] * 5) & MASK64, 7) * 9) & MASK64


def plus_output(s):
    # low bits are weak (linear), prefer the high bits for floats
    return (s[0] + s[3]) & MASK64


OUTPUTS = {
    'starstar': starstar_output,
    'plus': plus_output,
}


def advance(s):
    """Advance the state list ``s`` in place by one step."""
    t = (s[1] << 17) & MASK64
    s[2] ^= s[0]
    s[3] ^= s[1]
    s[1] ^= s[2]
    s[0] ^= s[3]
    s[2] ^= t
    s[3] = rotl(s[3], 45)


class Xoshiro256:
    """xoshiro256 bit generator with a selectable output function.

    ``variant`` is ``'starstar'`` (xoshiro256**, all-purpose) or ``'plus'``
    (xoshiro256+, faster, meant for floating point). Both walk through the
    same states for the same seed.

    Instances are not thread safe; give every thread its own generator
    (see :meth:`spawn`).
    """

    def __init__(self, s0, s1, s2, s3, variant='starstar'):
        if variant not in OUTPUTS:
            raise ValueError(f"unknown variant {variant!r}, expected one of {sorted(OUTPUTS)}")
        s = [s0 & MASK64, s1 & MASK64, s2 & MASK64, s3 & MASK64]
        if not any(s):
            raise ValueError("xoshiro256 state must not be all zero")
        self.s = s
        self.variant = variant
        self._output = OUTPUTS[variant]

    @classmethod
    def from_seed(cls, seed, variant='starstar'):
        """Fill the state with four consecutive SplitMix64 outputs of ``seed``."""
        seeder = SplitMix64(seed)
        return cls(seeder(), seeder(), seeder(), seeder(), variant=variant)

    @property
    def state(self):
        return tuple(self.s)

    def min(self):
        return 0

    def max(self):
        return MASK64

    def next_raw(self):
        result = self._output(self.s)
        advance(self.s)
        return result

    __call__ = next_raw

    def __iter__(self):
        return self

    __next__ = next_raw

    def peek_next(self):
        # return next value without consuming
        return self._output(self.s)

    def copy(self):
        return self.__class__(*self.s, variant=self.variant)

    def _jump(self, table):
        acc = [0, 0, 0, 0]
        for word in table:
            for b in range(64):
                if word & (1 << b):
                    acc[0] ^= self.s[0]
                    acc[1] ^= self.s[1]
                    acc[2] ^= self.s[2]
                    acc[3] ^= self.s[3]
                # advance on every bit, set or not
                advance(self.s)
        self.s = acc

    def jump(self):
        """Skip ahead 2^128 outputs in place."""
        self._jump(JUMP)
        logger.debug(f"jump -> {self.s[0]:016x} {self.s[1]:016x} {self.s[2]:016x} {self.s[3]:016x}")

    def long_jump(self):
        """Skip ahead 2^192 outputs in place."""
        self._jump(LONG_JUMP)
        logger.debug(f"long_jump -> {self.s[0]:016x} {self.s[1]:016x} {self.s[2]:016x} {self.s[3]:016x}")

    def spawn(self, n, long=False):
        """Return ``n`` generators on non-overlapping streams.

        Each child starts at the current state and ``self`` is jumped after
        every copy, so ``self`` ends up past all of them.
        """
        children = []
        for _ in range(n):
            children.append(self.copy())
            if long:
                self.long_jump()
            else:
                self.jump()
        return children

    def uniform(self, low, high):
        return distributions.uniform(self, low, high)

    def exponential(self, mean):
        return distributions.exponential(self, mean)

    def geometric(self, success):
        return distributions.geometric(self, success)

    def __repr__(self):
        words = ', '.join(f"0x{w:016x}" for w in self.s)
        return f"{self.__class__.__name__}({words}, variant={self.variant!r})"

# generator/splitmix64.py
# 64-bit SplitMix seed expander used to fill the xoshiro256 state.
# State: single 64-bit integer, advanced by a fixed odd (golden ratio) step.
# Output: three xor-shift / multiply rounds over the advanced state.

MASK64 = (1 << 64) - 1

GOLDEN_GAMMA = 0x9e3779b97f4a7c15
MIX1 = 0xbf58476d1ce4e5b9
MIX2 = 0x94d049bb133111eb


def mix64(z):
    z = ((z ^ (z >> 30)) * MIX1) & MASK64
    z = ((z ^ (z >> 27)) * MIX2) & MASK64
    return z ^ (z >> 31)


class SplitMix64:
    def __init__(self, seed):
        # any 64-bit value is a valid seed, zero included
        self.state = seed & MASK64

    def min(self):
        return 0

    def max(self):
        return MASK64

    def next_raw(self):
        self.state = (self.state + GOLDEN_GAMMA) & MASK64
        return mix64(self.state)

    __call__ = next_raw

    def peek_next(self):
        # return next value without consuming
        return mix64((self.state + GOLDEN_GAMMA) & MASK64)

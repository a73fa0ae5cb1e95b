# generator/debug.py
# Bit-string helper for inspecting generator words.

from .splitmix64 import MASK64


def u64_to_bits(x):
    """64-character binary string of ``x``, most significant bit first."""
    return format(x & MASK64, '064b')

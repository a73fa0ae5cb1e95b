from .generator import (
    SplitMix64,
    Xoshiro256,
    derive_seed,
    make_generator,
    rotl,
    u64_to_bits,
)

__all__ = [
    'SplitMix64',
    'Xoshiro256',
    'derive_seed',
    'make_generator',
    'rotl',
    'u64_to_bits',
]

from .debug import u64_to_bits
from .distributions import exponential, geometric, uniform
from .seeding import derive_seed, make_generator
from .splitmix64 import MASK64, SplitMix64
from .xoshiro256 import JUMP, LONG_JUMP, OUTPUTS, Xoshiro256, rotl

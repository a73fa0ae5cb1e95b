# generator/seeding.py
# Seed sources for building generators.
# Supports SEED_MODE = 'fixed' | 'random' | 'time'

import logging
import os
import time

from . import config
from .splitmix64 import MASK64
from .xoshiro256 import Xoshiro256

logger = logging.getLogger('xoshiro.seeding')


def derive_seed(mode=None, seed=None, clock=None):
    """
    Derive a 64-bit seed integer.
    Arguments override config; clock is a zero-argument callable used in
    place of the system clock for 'time' mode.
    Priority:
      - If mode == 'fixed' and a seed is given (or config.SEED is int) -> use it
      - If mode == 'fixed' and no seed -> use config.DEFAULT_SEED
      - If mode == 'random' -> use os.urandom(8)
      - If mode == 'time' -> use the clock reading
    """
    mode = (mode or config.SEED_MODE or 'fixed').lower()
    if seed is None:
        seed = config.SEED
    if mode == 'fixed':
        if seed is not None:
            seed = int(seed) & MASK64
            logger.info(f"Using fixed seed: {seed:016x}")
            return seed
        seed = config.DEFAULT_SEED & MASK64
        logger.info(f"Using default fixed seed: {seed:016x}")
        return seed
    elif mode == 'random':
        seed = int.from_bytes(os.urandom(8), 'big')
        logger.info(f"Using random seed (os.urandom): {seed:016x}")
        return seed
    elif mode == 'time':
        if clock is not None:
            t = clock()
        elif config.TIME_GRANULARITY == 's':
            t = int(time.time())
        else:
            t = time.time_ns()
        seed = int(t) & MASK64
        logger.info(f"Using time-derived seed (granu={config.TIME_GRANULARITY}): {seed:016x}")
        return seed
    else:
        seed = config.DEFAULT_SEED & MASK64
        logger.warning(f"Unknown SEED_MODE '{mode}', falling back to default seed: {seed:016x}")
        return seed


def make_generator(variant=None, seed=None, mode=None, clock=None):
    """Build a Xoshiro256 whose state is expanded from a derived seed.

    A seed given without a mode is used as a fixed seed.
    """
    if seed is not None and mode is None:
        mode = 'fixed'
    value = derive_seed(mode=mode, seed=seed, clock=clock)
    return Xoshiro256.from_seed(value, variant=variant or config.VARIANT)

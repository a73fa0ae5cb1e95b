# experiments/run_experiments.py
# Automate experiments: per variant, measure per-bit frequencies and the
# sample means of the distribution helpers, and collect them into CSV files.

import argparse
import csv
import logging
import os
import time

import numpy as np

from ..generator import config
from ..generator.xoshiro256 import OUTPUTS, Xoshiro256

logger = logging.getLogger('xoshiro.experiments')

BIT_POSITIONS = np.arange(64, dtype=np.uint64)

# distribution name -> (default parameter, expected mean as a function of it)
DISTRIBUTIONS = {
    'uniform': (None, lambda _: 0.5),
    'exponential': (2.0, lambda mean: mean),
    'geometric': (0.3, lambda p: (1 - p) / p),
}


def bit_frequencies(rng, draws):
    """Fraction of ones at each of the 64 bit positions over ``draws`` outputs."""
    values = np.fromiter((rng.next_raw() for _ in range(draws)), dtype=np.uint64, count=draws)
    bits = (values[:, None] >> BIT_POSITIONS) & np.uint64(1)
    return bits.mean(axis=0)


def draw(rng, name, param):
    if name == 'uniform':
        return rng.uniform(0.0, 1.0)
    if name == 'exponential':
        return rng.exponential(param)
    if name == 'geometric':
        return rng.geometric(param)
    raise ValueError(f"unknown distribution {name!r}")


def distribution_moments(rng, name, param, draws):
    """Return (sample_mean, expected_mean) for ``draws`` samples."""
    default, expected = DISTRIBUTIONS[name]
    if param is None:
        param = default
    samples = np.fromiter((draw(rng, name, param) for _ in range(draws)), dtype=np.float64, count=draws)
    return float(samples.mean()), expected(param)


def ensure_results_dir(path):
    os.makedirs(path, exist_ok=True)


def run(variants, trials, draws, seed, results_dir=config.RESULTS_DIR):
    """Run every (variant, trial) combination and return the two CSV paths.

    Trial streams come from one master generator per variant, jumped between
    trials so no two trials share outputs.
    """
    ensure_results_dir(results_dir)
    stamp = int(time.time())
    bits_path = os.path.join(results_dir, f'bits_{stamp}.csv')
    moments_path = os.path.join(results_dir, f'moments_{stamp}.csv')
    with open(bits_path, 'w', newline='') as fb, open(moments_path, 'w', newline='') as fm:
        bits_writer = csv.writer(fb)
        moments_writer = csv.writer(fm)
        bits_writer.writerow(['variant', 'trial', 'bit', 'frequency'])
        moments_writer.writerow(['variant', 'distribution', 'param', 'trial', 'draws',
                                 'sample_mean', 'expected_mean', 'rel_error', 'time_s'])
        for variant in variants:
            master = Xoshiro256.from_seed(seed, variant=variant)
            streams = master.spawn(trials)
            for trial, rng in enumerate(streams):
                logger.info(f"Running variant={variant}, trial={trial}")
                freqs = bit_frequencies(rng, draws)
                for bit, freq in enumerate(freqs):
                    bits_writer.writerow([variant, trial, bit, f"{freq:.6f}"])
                for name, (param, _) in DISTRIBUTIONS.items():
                    t0 = time.time()
                    sample_mean, expected_mean = distribution_moments(rng, name, param, draws)
                    elapsed = time.time() - t0
                    rel_error = abs(sample_mean - expected_mean) / expected_mean
                    moments_writer.writerow([variant, name, '' if param is None else param, trial, draws,
                                             f"{sample_mean:.6f}", f"{expected_mean:.6f}",
                                             f"{rel_error:.6f}", f"{elapsed:.3f}"])
                fb.flush()
                fm.flush()
    return bits_path, moments_path


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--variants', type=str, default=','.join(OUTPUTS), help='comma list')
    parser.add_argument('--trials', type=int, default=config.TRIALS, help='streams per variant')
    parser.add_argument('--draws', type=int, default=config.SAMPLES, help='draws per measurement')
    parser.add_argument('--seed', type=int, default=config.DEFAULT_SEED, help='master seed')
    parser.add_argument('--results_dir', type=str, default=config.RESULTS_DIR)
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))

    variants = [v for v in args.variants.split(',') if v]
    bits_path, moments_path = run(variants, args.trials, args.draws, args.seed, args.results_dir)
    logger.info(f"Experiments complete. CSV saved at: {bits_path}, {moments_path}")


if __name__ == '__main__':
    main()

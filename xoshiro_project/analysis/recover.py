# analysis/recover.py
# Observe xoshiro256+ outputs, build a linear system over GF(2) from their
# lowest bits, solve for the 256-bit state, then predict the next output.
# Bit 0 of s0 + s3 is s0 ^ s3 at bit 0, and the state update is linear,
# so every low output bit is a linear function of the initial state bits.

import argparse
import logging
import time

from ..generator import config
from ..generator.seeding import make_generator
from ..generator.splitmix64 import MASK64
from ..generator.xoshiro256 import Xoshiro256

logger = logging.getLogger('xoshiro.recover')

BITS = 256


# Symbolic state: four words, each a list of 64 integer masks telling which
# initial bits (word * 64 + bit) contribute to that bit of the current word.
def initial_symbols():
    return [[1 << (w * 64 + i) for i in range(64)] for w in range(4)]


def sym_xor(a, b):
    return [x ^ y for x, y in zip(a, b)]


def sym_shl(a, k):
    return [0] * k + a[:64 - k]


def sym_rotl(a, k):
    return a[64 - k:] + a[:64 - k]


def build_low_bit_maps(steps):
    # maps[t] is the mask of initial bits whose xor gives bit 0 of output t
    s0, s1, s2, s3 = initial_symbols()
    maps = []
    for _ in range(steps):
        maps.append(s0[0] ^ s3[0])
        t = sym_shl(s1, 17)
        s2 = sym_xor(s2, s0)
        s3 = sym_xor(s3, s1)
        s1 = sym_xor(s1, s2)
        s0 = sym_xor(s0, s3)
        s2 = sym_xor(s2, t)
        s3 = sym_rotl(s3, 45)
    return maps


def construct_equations(observed):
    maps = build_low_bit_maps(len(observed))
    rows = []
    rhs = []
    for mask, out in zip(maps, observed):
        if mask == 0:
            continue
        rows.append(mask)
        rhs.append(out & 1)
    return rows, rhs


# Gauss-Jordan elimination over GF(2) with integer row masks of <=256 bits
def solve_gf2(rows, rhs):
    rows = rows[:]
    rhs = rhs[:]
    n_eq = len(rows)
    pivot = {}
    row = 0
    for col in reversed(range(BITS)):
        sel = None
        for r in range(row, n_eq):
            if (rows[r] >> col) & 1:
                sel = r
                break
        if sel is None:
            continue
        rows[row], rows[sel] = rows[sel], rows[row]
        rhs[row], rhs[sel] = rhs[sel], rhs[row]
        pivot[col] = row
        # eliminate other rows
        for r in range(n_eq):
            if r != row and ((rows[r] >> col) & 1):
                rows[r] ^= rows[row]
                rhs[r] ^= rhs[row]
        row += 1
        if row >= n_eq:
            break
    if len(pivot) < BITS:
        # under-determined
        return None
    sol = 0
    for col, r in pivot.items():
        if rhs[r]:
            sol |= (1 << col)
    # verify
    for rmask, rval in zip(rows, rhs):
        lhs = bin(rmask & sol).count('1') & 1
        if lhs != rval:
            return None
    return sol


def recover_state(observed):
    """Recover the xoshiro256+ state that produced ``observed``.

    Returns the four state words before the first observed output, or None
    if the outputs are inconsistent.
    """
    if len(observed) < BITS:
        raise ValueError(f"need at least {BITS} outputs, got {len(observed)}")
    rows, rhs = construct_equations(observed)
    sol = solve_gf2(rows, rhs)
    if sol is None:
        return None
    return tuple((sol >> (64 * w)) & MASK64 for w in range(4))


def predict_next(state, steps):
    rng = Xoshiro256(*state, variant='plus')
    for _ in range(steps):
        rng.next_raw()
    return rng.next_raw()


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--samples', type=int, default=320, help='number of outputs to observe (>= 256)')
    parser.add_argument('--seed', type=int, default=None, help='seed of the observed generator (default: from config)')
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))

    t0 = time.time()
    target = make_generator(variant='plus', seed=args.seed)
    logger.info(f"Observing {args.samples} xoshiro256+ outputs...")
    obs = [target.next_raw() for _ in range(args.samples)]
    rows, rhs = construct_equations(obs)
    logger.info(f"Constructed {len(rows)} linear equations. Solving...")
    state = recover_state(obs)
    if state is None:
        logger.error("Failed to find unique solution. Try increasing samples.")
    else:
        logger.info("Recovered initial state: " + ' '.join(f"{w:016x}" for w in state))
        predicted = predict_next(state, len(obs))
        actual = target.next_raw()
        logger.info(f"Predicted next output {predicted:016x}, actual {actual:016x}, ok={predicted == actual}")
    logger.info(f"Done in {time.time() - t0:.2f}s")


if __name__ == '__main__':
    main()

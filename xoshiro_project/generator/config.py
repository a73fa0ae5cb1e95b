# generator/config.py
# Configuration for generator construction and the experiment tools

# Seed configuration:
# - SEED_MODE:
#     'fixed'  : use the integer in SEED (if SEED is None, falls back to DEFAULT_SEED)
#     'random' : use os.urandom(8) (non-deterministic each run)
#     'time'   : use the current clock reading as seed
SEED_MODE = 'time'   # 'fixed' | 'random' | 'time'

# If SEED_MODE == 'fixed', use this SEED (64-bit integer).
SEED = None
DEFAULT_SEED = 0x0123456789ABCDEF

# If SEED_MODE == 'time': 'ns' -> time.time_ns(), 's' -> int(time.time())
TIME_GRANULARITY = 'ns'  # 'ns' or 's'

# Output function: 'starstar' (xoshiro256**) or 'plus' (xoshiro256+)
VARIANT = 'starstar'

# Experiment defaults
SAMPLES = 100000
TRIALS = 5
RESULTS_DIR = 'results'

# Logging level
LOG_LEVEL = 'INFO'

# atc_ga/constants.py
import numpy as np

# população / evolução
DEFAULT_MAX_INDIVIDUALS = 400
DEFAULT_REPRODUCTION_RATE = 0.4
DEFAULT_MUTATION_RATE = 0.5
DEFAULT_MUTATION_START_FRACTION = 0.5
DEFAULT_MAX_GENERATIONS = 900
DEFAULT_STAGNATION_FRACTION = 2.0 / 3.0

# escalonamento
DEFAULT_RANDOM_TIME_WINDOW = 10
DEFAULT_CROSSOVER_CLONES = 2
DEFAULT_CROSSOVER_SHUFFLE_PROB = 0.0

# custo de uma sequência inviável
INFEASIBLE_FITNESS = int(np.iinfo(np.int64).max)

SEED = 42
WORKERS = 1
LOG_INTERVAL = 50

FIT_CACHE_MAX_ENTRIES = 200_000
FIT_CACHE_DIGEST_BYTES = 8

# atc_ga/operators.py
"""Selection, crossover and mutation."""
import random
from typing import List

from .constants import DEFAULT_CROSSOVER_CLONES, DEFAULT_CROSSOVER_SHUFFLE_PROB
from .evaluator import FitnessEvaluator
from .exceptions import ConfigurationError
from .model import Individual, Parents
from .population import Population, PopulationConfig
from .scheduler import LandingTimeScheduler


class SelectionOperator:
    """Pairs consecutive individuals from the front of the sorted population:
    (0, 1), (1, 2), ... so the fittest take part in two pairs."""

    def __init__(self, config: PopulationConfig):
        config.validate()
        self.config = config

    def select_parents(self, population: Population) -> List[Parents]:
        population.sort_by_fitness()
        count = min(self.config.reproduction_count, len(population) - 1)
        return [Parents(population.get(i), population.get(i + 1)) for i in range(max(count, 0))]


class CrossoverOperator:
    """Explores alternative time assignments around each parent.

    Each parent is cloned ``clones_per_parent`` times with random times near
    the target and once more with the target times, every clone is swept
    forward and evaluated, and the fittest clone is the child. The parents
    are never modified.
    """

    def __init__(self, scheduler: LandingTimeScheduler, fitness_evaluator: FitnessEvaluator,
                 rng: random.Random = None, clones_per_parent: int = DEFAULT_CROSSOVER_CLONES,
                 shuffle_probability: float = DEFAULT_CROSSOVER_SHUFFLE_PROB):
        if clones_per_parent < 0:
            raise ConfigurationError("clones_per_parent must be >= 0")
        if not 0.0 <= shuffle_probability <= 1.0:
            raise ConfigurationError("shuffle_probability must be in [0, 1]")
        self.scheduler = scheduler
        self.fitness_evaluator = fitness_evaluator
        self.rng = rng or random.Random()
        self.clones_per_parent = int(clones_per_parent)
        self.shuffle_probability = float(shuffle_probability)

    def _clone(self, parent: Individual) -> Individual:
        child = parent.clone()
        if self.shuffle_probability and self.rng.random() < self.shuffle_probability:
            self.rng.shuffle(child.sequence)
        return child

    def execute(self, parents: Parents) -> Individual:
        candidates = []
        for parent in (parents.parent1, parents.parent2):
            for _ in range(self.clones_per_parent):
                child = self._clone(parent)
                self.scheduler.schedule_random_times_from_begin(child.sequence)
                candidates.append(child)
            child = self._clone(parent)
            self.scheduler.schedule_target_times_from_begin(child.sequence)
            candidates.append(child)

        self.fitness_evaluator.evaluate_individuals(candidates)
        return min(candidates, key=lambda ind: ind.fitness)


class MutationOperator:
    """Shuffles the landing order, draws new times near the targets and
    re-evaluates. Works in place."""

    def __init__(self, scheduler: LandingTimeScheduler, fitness_evaluator: FitnessEvaluator,
                 rng: random.Random = None):
        self.scheduler = scheduler
        self.fitness_evaluator = fitness_evaluator
        self.rng = rng or random.Random()

    def execute(self, individual: Individual):
        self.rng.shuffle(individual.sequence)
        self.scheduler.schedule_random_times_from_begin(individual.sequence)
        individual.fitness = self.fitness_evaluator.evaluate(individual.sequence)

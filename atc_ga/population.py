# atc_ga/population.py
import logging
from dataclasses import dataclass
from typing import Iterator, List

from .constants import (
    DEFAULT_MAX_INDIVIDUALS, DEFAULT_REPRODUCTION_RATE,
    DEFAULT_MUTATION_RATE, DEFAULT_MUTATION_START_FRACTION,
)
from .exceptions import ConfigurationError
from .model import Individual

logger = logging.getLogger(__name__)

# sementes determinísticas usadas na população inicial
MIN_INDIVIDUALS = 3


@dataclass(frozen=True)
class PopulationConfig:
    """Population size and breeding rates.

    ``mutation_start_fraction`` marks where, in the fitness-sorted
    population, the individuals eligible for mutation begin.
    """
    max_individuals: int = DEFAULT_MAX_INDIVIDUALS
    reproduction_rate: float = DEFAULT_REPRODUCTION_RATE
    mutation_rate: float = DEFAULT_MUTATION_RATE
    mutation_start_fraction: float = DEFAULT_MUTATION_START_FRACTION

    def __post_init__(self):
        self.validate()

    @property
    def reproduction_count(self) -> int:
        return int(self.max_individuals * self.reproduction_rate)

    @property
    def mutation_count(self) -> int:
        return int(self.max_individuals * self.mutation_rate)

    def validate(self):
        if self.max_individuals < MIN_INDIVIDUALS:
            raise ConfigurationError(
                f"max_individuals must be >= {MIN_INDIVIDUALS} to hold the deterministic seeds, "
                f"got {self.max_individuals}"
            )
        if not 0.0 < self.reproduction_rate <= 1.0:
            raise ConfigurationError(f"reproduction_rate must be in (0, 1], got {self.reproduction_rate}")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ConfigurationError(f"mutation_rate must be in [0, 1], got {self.mutation_rate}")
        if not 0.0 <= self.mutation_start_fraction < 1.0:
            raise ConfigurationError(
                f"mutation_start_fraction must be in [0, 1), got {self.mutation_start_fraction}"
            )
        # cada par usa os índices i e i+1 da população ordenada
        if self.reproduction_count > self.max_individuals - 1:
            raise ConfigurationError(
                f"reproduction_rate {self.reproduction_rate} selects {self.reproduction_count} pairs, "
                f"but {self.max_individuals} individuals allow at most {self.max_individuals - 1}"
            )


class Population:
    def __init__(self, individuals: List[Individual], config: PopulationConfig):
        config.validate()
        self._individuals = list(individuals)
        self.config = config
        self.sorted = False

    def __len__(self):
        return len(self._individuals)

    def __iter__(self) -> Iterator[Individual]:
        return iter(self._individuals)

    @property
    def individuals(self) -> List[Individual]:
        return list(self._individuals)

    def _index_of(self, individual: Individual) -> int:
        for i, ind in enumerate(self._individuals):
            if ind is individual:
                return i
        raise ValueError("individual is not part of the population")

    def add(self, individual: Individual):
        self._individuals.append(individual)
        self.sorted = False

    def remove(self, individual: Individual):
        del self._individuals[self._index_of(individual)]

    def replace(self, new_individual: Individual, old_individual: Individual):
        """Put ``new_individual`` in the slot of ``old_individual``."""
        self._individuals[self._index_of(old_individual)] = new_individual
        self.sorted = False

    def replace_less_adapted(self, individual: Individual) -> bool:
        worst = self.less_adapted_individual()
        if individual.is_more_adapted_than(worst):
            self.replace(individual, worst)
            return True
        return False

    def get(self, index: int) -> Individual:
        return self._individuals[index]

    def mark_unsorted(self):
        self.sorted = False

    def sort_by_fitness(self):
        if not self.sorted:
            self._individuals.sort(key=lambda ind: ind.fitness)
            self.sorted = True

    def most_adapted_individual(self) -> Individual:
        self.sort_by_fitness()
        return self._individuals[0]

    def less_adapted_individual(self) -> Individual:
        self.sort_by_fitness()
        return self._individuals[-1]

    def mutation_candidates_range(self) -> range:
        size = len(self._individuals)
        start = min(int(size * self.config.mutation_start_fraction), max(size - 1, 0))
        return range(start, size)


class PopulationInitializer:
    """Seeds the first generation: one individual per deterministic ordering
    (target, penalty, latest), the rest from the randomized creators in turn."""

    DETERMINISTIC_SEEDS = ("sorted_by_target_times", "sorted_by_penalty_cost", "sorted_by_latest_times")
    RANDOM_SEEDS = (
        "sorted_by_random_times",
        "random_order",
        "random_with_random_times",
        "earliest_times",
        "random_sorted_by_aircraft_cost",
    )

    def __init__(self, individual_creator, config: PopulationConfig):
        self.individual_creator = individual_creator
        self.config = config

    def create_population(self) -> Population:
        creator = self.individual_creator
        size = self.config.max_individuals
        individuals = [creator.create(name, "target_from_begin", evaluate=False)
                       for name in self.DETERMINISTIC_SEEDS]
        i = 0
        while len(individuals) < size:
            name = self.RANDOM_SEEDS[i % len(self.RANDOM_SEEDS)]
            schedule = "from_begin" if i % 2 == 0 else "random_from_begin"
            individuals.append(creator.create(name, schedule, evaluate=False))
            i += 1

        creator.fitness_evaluator.evaluate_individuals(individuals)
        population = Population(individuals, self.config)
        population.sort_by_fitness()
        feasible = sum(1 for ind in population if ind.is_feasible())
        logger.info(
            f"Initial population: {len(population)} individuals, {feasible} feasible, "
            f"best={population.get(0).fitness}"
        )
        return population

# atc_ga/ga.py
import random
import time
import logging
from enum import Enum
from typing import List, Optional, Sequence

from .aircraft import AircraftStaticData
from .constants import *
from .evaluator import FitnessEvaluator
from .exceptions import AlgorithmException, ConfigurationError
from .model import Individual, Parents, Solution
from .operators import CrossoverOperator, MutationOperator, SelectionOperator
from .population import Population, PopulationConfig, PopulationInitializer
from .scheduler import LandingTimeScheduler
from .sequences import IndividualCreator, LandingSequenceCreator

logger = logging.getLogger(__name__)


class GAState(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    EVOLVING = "evolving"
    TERMINATED = "terminated"


class GeneticAlgorithm:
    """Evolves landing schedules for one problem instance.

    Each generation records the best-ever individual, breeds the selected
    pairs (a child only replaces the less fit of its parents, and only when
    strictly fitter) and mutates individuals drawn from the less fit part of
    the population. The run stops on stagnation, on ``max_generations`` or
    on the optional wall-clock deadline.
    """

    def __init__(self, aircrafts: Sequence[AircraftStaticData],
                 population_config: PopulationConfig = None,
                 max_generations=DEFAULT_MAX_GENERATIONS,
                 stagnation_fraction=DEFAULT_STAGNATION_FRACTION,
                 seed=SEED, rng: random.Random = None, n_workers=WORKERS,
                 random_time_window=DEFAULT_RANDOM_TIME_WINDOW,
                 crossover_clones=DEFAULT_CROSSOVER_CLONES,
                 crossover_shuffle_probability=DEFAULT_CROSSOVER_SHUFFLE_PROB,
                 deadline_seconds: Optional[float] = None,
                 log_interval=LOG_INTERVAL):
        self.config = population_config or PopulationConfig()
        self.max_generations = int(max_generations)
        self.stagnation_fraction = float(stagnation_fraction)
        if self.max_generations < 1:
            raise ConfigurationError(f"max_generations must be >= 1, got {max_generations}")
        if not 0.0 < self.stagnation_fraction <= 1.0:
            raise ConfigurationError(f"stagnation_fraction must be in (0, 1], got {stagnation_fraction}")
        if deadline_seconds is not None and deadline_seconds <= 0:
            raise ConfigurationError(f"deadline_seconds must be > 0, got {deadline_seconds}")
        self.deadline_seconds = deadline_seconds
        self.log_interval = max(1, int(log_interval))
        self.rng = rng or random.Random(seed)

        self.aircrafts = tuple(aircrafts)
        self.fitness_evaluator = FitnessEvaluator(self.aircrafts, n_workers=n_workers)
        self.scheduler = LandingTimeScheduler(self.rng, random_time_window)
        self.sequence_creator = LandingSequenceCreator(self.aircrafts, self.rng)
        self.individual_creator = IndividualCreator(
            self.sequence_creator, self.fitness_evaluator, self.scheduler
        )
        self.population_initializer = PopulationInitializer(self.individual_creator, self.config)
        self.selection_operator = SelectionOperator(self.config)
        self.crossover_operator = CrossoverOperator(
            self.scheduler, self.fitness_evaluator, self.rng,
            clones_per_parent=crossover_clones, shuffle_probability=crossover_shuffle_probability,
        )
        self.mutation_operator = MutationOperator(self.scheduler, self.fitness_evaluator, self.rng)

        self.state = GAState.UNINITIALIZED
        self.population: Optional[Population] = None
        self.best_individual: Optional[Individual] = None
        self.generation = 0
        self.generations_without_improvement = 0
        self.fitness_history: List[int] = []
        self.stopped_by: Optional[str] = None
        self.solution: Optional[Solution] = None
        self._start_time = None

    @property
    def stagnation_limit(self) -> float:
        return self.max_generations * self.stagnation_fraction

    def initialize(self):
        self.population = self.population_initializer.create_population()
        self.best_individual = None
        self.generation = 1
        self.generations_without_improvement = 0
        self.fitness_history = []
        self.stopped_by = None
        self.solution = None
        self.state = GAState.INITIALIZED

    # passos de uma geração
    def _update_best(self, track_stagnation=True):
        generation_best = self.population.most_adapted_individual()
        if self.best_individual is None:
            self.best_individual = generation_best.clone()
        elif generation_best.is_more_adapted_than(self.best_individual):
            self.best_individual = generation_best.clone()
            if track_stagnation:
                self.generations_without_improvement = 0
        elif track_stagnation:
            self.generations_without_improvement += 1
        self.fitness_history.append(self.best_individual.fitness)

    def _reproduce(self, selected: List[Parents]) -> int:
        replaced = set()
        for parents in selected:
            child = self.crossover_operator.execute(parents)
            loser = parents.less_adapted_parent()
            # pares se sobrepõem: o mesmo pai pode perder duas vezes
            if id(loser) in replaced:
                continue
            if child.is_more_adapted_than(loser):
                self.population.replace(child, loser)
                replaced.add(id(loser))
        return len(replaced)

    def _mutate(self) -> int:
        self.population.sort_by_fitness()
        n = int(len(self.population) * self.config.mutation_rate)
        candidates = self.population.mutation_candidates_range()
        for _ in range(n):
            idx = self.rng.randrange(candidates.start, candidates.stop)
            self.mutation_operator.execute(self.population.get(idx))
        if n:
            self.population.mark_unsorted()
        return n

    def step(self):
        """Run one generation."""
        if self.state is GAState.UNINITIALIZED:
            self.initialize()
        self.state = GAState.EVOLVING
        self._update_best()
        selected = self.selection_operator.select_parents(self.population)
        self._reproduce(selected)
        self._mutate()
        self.population.sort_by_fitness()
        self.generation += 1

    def _stop_reason(self) -> Optional[str]:
        if self.generations_without_improvement > self.stagnation_limit:
            return "stagnation"
        if self.generation >= self.max_generations:
            return "max_generations"
        if self.deadline_seconds is not None and time.time() - self._start_time >= self.deadline_seconds:
            return "deadline"
        return None

    def execute(self) -> Solution:
        try:
            self._start_time = time.time()
            if self.state in (GAState.UNINITIALIZED, GAState.TERMINATED):
                self.initialize()

            logger.info(
                f"GA started: aircrafts={len(self.aircrafts)}, pop={self.config.max_individuals}, "
                f"max_gen={self.max_generations}, stagnation_limit={self.stagnation_limit:.1f}"
            )

            while True:
                self.stopped_by = self._stop_reason()
                if self.stopped_by is not None:
                    break
                self.step()
                if self.generation % self.log_interval == 0:
                    elapsed = time.time() - self._start_time
                    logger.info(
                        f"G{self.generation:4d} | Fit: {self.best_individual.fitness} | "
                        f"Stag: {self.generations_without_improvement} | Elap: {elapsed:.1f}s"
                    )

            # descendentes da última geração ainda não foram comparados
            self._update_best(track_stagnation=False)
            elapsed = time.time() - self._start_time
            self.state = GAState.TERMINATED
            self.solution = Solution(
                population=self.population,
                best_individual=self.best_individual,
                max_generations=self.max_generations,
                generation_count=self.generation,
                generations_without_improvement=self.generations_without_improvement,
                fitness_history=list(self.fitness_history),
                elapsed_seconds=elapsed,
                stopped_by=self.stopped_by,
            )
            logger.info(
                f"GA finished ({self.stopped_by}) at G{self.generation}: best={self.best_individual.fitness}, "
                f"evaluations={self.fitness_evaluator.evaluations}, elapsed={elapsed:.1f}s"
            )
            return self.solution
        except Exception as e:
            self.state = GAState.TERMINATED
            raise AlgorithmException("An exception occurred while the genetic algorithm was running.", e) from e

# atc_ga/sequences.py
"""Initial landing orders and the individuals built from them.

An individual is the product of an ordering strategy (which aircraft lands
first) and a scheduling strategy (which times they get); see
``ORDERING_STRATEGIES`` and ``scheduler.SCHEDULING_STRATEGIES``.
"""
import random
from typing import List, Sequence

from .aircraft import Aircraft, AircraftStaticData
from .evaluator import FitnessEvaluator
from .exceptions import ConfigurationError
from .model import Individual
from .scheduler import LandingTimeScheduler


class LandingSequenceCreator:
    def __init__(self, aircrafts: Sequence[AircraftStaticData], rng: random.Random = None):
        self.aircrafts = tuple(aircrafts)
        self.rng = rng or random.Random()

    def _fresh(self) -> List[Aircraft]:
        # todos no tempo alvo
        return [Aircraft(s) for s in self.aircrafts]

    def _with_random_times_before_target(self) -> List[Aircraft]:
        sequence = self._fresh()
        for aircraft in sequence:
            aircraft.set_random_landing_time_before_target(self.rng)
        return sequence

    def sorted_by_target_times(self) -> List[Aircraft]:
        sequence = self._fresh()
        sequence.sort(key=lambda a: a.landing_time)
        return sequence

    def sorted_by_latest_times(self) -> List[Aircraft]:
        sequence = self._fresh()
        for aircraft in sequence:
            aircraft.set_latest_landing_time()
        sequence.sort(key=lambda a: a.landing_time)
        return sequence

    def sorted_by_penalty_cost(self) -> List[Aircraft]:
        """Highest after-target penalty lands first."""
        sequence = self._fresh()
        sequence.sort(key=lambda a: a.static.landing_after_target_penalty_cost, reverse=True)
        return sequence

    def sorted_by_random_times(self) -> List[Aircraft]:
        sequence = self._with_random_times_before_target()
        sequence.sort(key=lambda a: a.landing_time)
        return sequence

    def random_order(self) -> List[Aircraft]:
        sequence = self._fresh()
        self.rng.shuffle(sequence)
        return sequence

    def random_with_random_times(self) -> List[Aircraft]:
        sequence = self._with_random_times_before_target()
        self.rng.shuffle(sequence)
        return sequence

    def earliest_times(self) -> List[Aircraft]:
        sequence = self._fresh()
        for aircraft in sequence:
            aircraft.set_earliest_landing_time()
        self.rng.shuffle(sequence)
        return sequence

    def random_sorted_by_aircraft_cost(self) -> List[Aircraft]:
        sequence = self._with_random_times_before_target()
        sequence.sort(key=lambda a: a.landing_cost())
        return sequence

    def create(self, strategy: str) -> List[Aircraft]:
        if strategy not in ORDERING_STRATEGIES:
            raise ConfigurationError(
                f"unknown ordering strategy {strategy!r}; expected one of {sorted(ORDERING_STRATEGIES)}"
            )
        return getattr(self, strategy)()


ORDERING_STRATEGIES = frozenset({
    "sorted_by_target_times",
    "sorted_by_latest_times",
    "sorted_by_penalty_cost",
    "sorted_by_random_times",
    "random_order",
    "random_with_random_times",
    "earliest_times",
    "random_sorted_by_aircraft_cost",
})


class IndividualCreator:
    def __init__(self, sequence_creator: LandingSequenceCreator,
                 fitness_evaluator: FitnessEvaluator, scheduler: LandingTimeScheduler):
        self.sequence_creator = sequence_creator
        self.fitness_evaluator = fitness_evaluator
        self.scheduler = scheduler

    def create(self, ordering: str, schedule: str = "from_begin", evaluate: bool = True) -> Individual:
        sequence = self.sequence_creator.create(ordering)
        return self.create_for_sequence(sequence, schedule, evaluate)

    def create_for_sequence(self, sequence: List[Aircraft], schedule: str = "from_begin",
                            evaluate: bool = True) -> Individual:
        """Schedule ``sequence`` in place and wrap it. With ``evaluate=False``
        the fitness is left for a later batch evaluation."""
        self.scheduler.schedule(sequence, schedule)
        individual = Individual(sequence)
        if evaluate:
            individual.fitness = self.fitness_evaluator.evaluate(sequence)
        return individual

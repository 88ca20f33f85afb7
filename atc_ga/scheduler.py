# atc_ga/scheduler.py
"""Landing time heuristics.

Every heuristic keeps the order of the sequence it receives and only
rewrites ``landing_time``. A sweep fixes the separation against the
immediate neighbour only, in O(n).
"""
import random
from typing import List

from .aircraft import Aircraft
from .constants import DEFAULT_RANDOM_TIME_WINDOW
from .exceptions import ConfigurationError


class LandingTimeScheduler:
    def __init__(self, rng: random.Random = None, random_time_window: int = DEFAULT_RANDOM_TIME_WINDOW):
        if random_time_window < 0:
            raise ConfigurationError("random_time_window must be >= 0")
        self.rng = rng or random.Random()
        self.random_time_window = int(random_time_window)

    # varreduras
    def schedule_from_begin(self, sequence: List[Aircraft]):
        for i in range(1, len(sequence)):
            previous, current = sequence[i - 1], sequence[i]
            if not current.respects_gap_after(previous):
                current.set_min_landing_time_after(previous)

    def schedule_from_end(self, sequence: List[Aircraft]):
        for i in range(len(sequence) - 2, -1, -1):
            current, following = sequence[i], sequence[i + 1]
            if not following.respects_gap_after(current):
                current.landing_time = following.landing_time - following.gap_after(current)

    # tempos alvo
    def schedule_target_times_from_begin(self, sequence: List[Aircraft]):
        for aircraft in sequence:
            aircraft.set_target_landing_time()
        self.schedule_from_begin(sequence)

    def schedule_target_times_from_end(self, sequence: List[Aircraft]):
        for aircraft in sequence:
            aircraft.set_target_landing_time()
        self.schedule_from_end(sequence)

    # perturbação aleatória em torno do alvo
    def _set_random_times(self, sequence: List[Aircraft]):
        for aircraft in sequence:
            aircraft.set_random_landing_time(self.rng, self.random_time_window)

    def schedule_random_times_from_begin(self, sequence: List[Aircraft]):
        self._set_random_times(sequence)
        self.schedule_from_begin(sequence)

    def schedule_random_times_from_end(self, sequence: List[Aircraft]):
        self._set_random_times(sequence)
        self.schedule_from_end(sequence)

    def schedule_towards_target(self, sequence: List[Aircraft]):
        """Forward sweep, then move each aircraft as close to its target as
        its window and the gaps to both neighbours allow."""
        self.schedule_from_begin(sequence)
        n = len(sequence)
        for i, aircraft in enumerate(sequence):
            low = aircraft.earliest_landing_time
            high = aircraft.latest_landing_time
            if i > 0:
                low = max(low, sequence[i - 1].landing_time + aircraft.gap_after(sequence[i - 1]))
            if i < n - 1:
                following = sequence[i + 1]
                high = min(high, following.landing_time - following.gap_after(aircraft))
            if low > high:
                continue
            aircraft.landing_time = min(max(aircraft.target_landing_time, low), high)

    def schedule(self, sequence: List[Aircraft], strategy: str):
        try:
            method = SCHEDULING_STRATEGIES[strategy]
        except KeyError:
            raise ConfigurationError(
                f"unknown scheduling strategy {strategy!r}; expected one of {sorted(SCHEDULING_STRATEGIES)}"
            ) from None
        getattr(self, method)(sequence)


SCHEDULING_STRATEGIES = {
    "from_begin": "schedule_from_begin",
    "from_end": "schedule_from_end",
    "target_from_begin": "schedule_target_times_from_begin",
    "target_from_end": "schedule_target_times_from_end",
    "random_from_begin": "schedule_random_times_from_begin",
    "random_from_end": "schedule_random_times_from_end",
    "towards_target": "schedule_towards_target",
}

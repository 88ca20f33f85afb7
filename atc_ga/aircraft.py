# atc_ga/aircraft.py
import random
from dataclasses import dataclass
from typing import Tuple

from .exceptions import InstanceError


@dataclass(frozen=True)
class AircraftStaticData:
    """Problem parameters of one aircraft, loaded once per instance.

    ``gap_times[j]`` is the minimum separation required when aircraft ``j``
    lands immediately before this one.
    """
    aircraft_id: int
    appearance_time: int
    earliest_landing_time: int
    target_landing_time: int
    latest_landing_time: int
    landing_before_target_penalty_cost: float
    landing_after_target_penalty_cost: float
    gap_times: Tuple[int, ...]

    def __post_init__(self):
        if not (self.earliest_landing_time <= self.target_landing_time <= self.latest_landing_time):
            raise InstanceError(
                f"aircraft {self.aircraft_id}: expected earliest <= target <= latest, got "
                f"{self.earliest_landing_time}, {self.target_landing_time}, {self.latest_landing_time}"
            )
        if self.landing_before_target_penalty_cost < 0 or self.landing_after_target_penalty_cost < 0:
            raise InstanceError(f"aircraft {self.aircraft_id}: penalty costs must be non-negative")
        # aceita listas / arrays vindos do parser
        object.__setattr__(self, "gap_times", tuple(int(g) for g in self.gap_times))

    def gap_after(self, previous_id: int) -> int:
        return self.gap_times[previous_id]


class Aircraft:
    """A landing time bound to shared, read-only static data."""
    __slots__ = ("static", "landing_time")

    def __init__(self, static: AircraftStaticData, landing_time: int = None):
        self.static = static
        self.landing_time = static.target_landing_time if landing_time is None else int(landing_time)

    def clone(self) -> "Aircraft":
        return Aircraft(self.static, self.landing_time)

    @property
    def aircraft_id(self) -> int:
        return self.static.aircraft_id

    @property
    def earliest_landing_time(self) -> int:
        return self.static.earliest_landing_time

    @property
    def target_landing_time(self) -> int:
        return self.static.target_landing_time

    @property
    def latest_landing_time(self) -> int:
        return self.static.latest_landing_time

    # separação
    def gap_after(self, previous: "Aircraft") -> int:
        return self.static.gap_after(previous.aircraft_id)

    def respects_gap_after(self, previous: "Aircraft") -> bool:
        return self.landing_time >= previous.landing_time + self.gap_after(previous)

    def set_min_landing_time_after(self, previous: "Aircraft"):
        self.landing_time = previous.landing_time + self.gap_after(previous)

    # janela / custo
    def in_landing_window(self) -> bool:
        return self.static.earliest_landing_time <= self.landing_time <= self.static.latest_landing_time

    def landing_cost(self) -> float:
        s = self.static
        early = max(0, s.target_landing_time - self.landing_time)
        late = max(0, self.landing_time - s.target_landing_time)
        return s.landing_before_target_penalty_cost * early + s.landing_after_target_penalty_cost * late

    def set_target_landing_time(self):
        self.landing_time = self.static.target_landing_time

    def set_earliest_landing_time(self):
        self.landing_time = self.static.earliest_landing_time

    def set_latest_landing_time(self):
        self.landing_time = self.static.latest_landing_time

    def set_random_landing_time(self, rng: random.Random, delta: int):
        """Uniform time in [target - delta, target + delta], clamped to the window."""
        s = self.static
        low = max(s.earliest_landing_time, s.target_landing_time - delta)
        high = min(s.latest_landing_time, s.target_landing_time + delta)
        self.landing_time = rng.randint(low, high)

    def set_random_landing_time_before_target(self, rng: random.Random):
        s = self.static
        self.landing_time = rng.randint(s.earliest_landing_time, s.target_landing_time)

    def __repr__(self) -> str:
        return f"Aircraft(id={self.aircraft_id}, t={self.landing_time})"

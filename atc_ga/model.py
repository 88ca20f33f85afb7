# atc_ga/model.py
from dataclasses import dataclass, field
from typing import Dict, List, TYPE_CHECKING

from .aircraft import Aircraft
from .constants import INFEASIBLE_FITNESS

if TYPE_CHECKING:
    from .population import Population


class Individual:
    """A candidate schedule: the landing order (list order) and the times
    carried by each Aircraft. Lower fitness is better."""

    def __init__(self, sequence: List[Aircraft], fitness: int = INFEASIBLE_FITNESS):
        self.sequence = sequence
        self.fitness = int(fitness)

    def clone(self) -> "Individual":
        return Individual([a.clone() for a in self.sequence], self.fitness)

    def is_more_adapted_than(self, other: "Individual") -> bool:
        return self.fitness < other.fitness

    def is_feasible(self) -> bool:
        return self.fitness != INFEASIBLE_FITNESS

    def landing_times(self) -> Dict[int, int]:
        return {a.aircraft_id: a.landing_time for a in self.sequence}

    def __len__(self):
        return len(self.sequence)

    def __repr__(self) -> str:
        order = [a.aircraft_id for a in self.sequence]
        fit = self.fitness if self.is_feasible() else "inf"
        return f"Individual(fit={fit}, order={order})"


@dataclass
class Parents:
    parent1: Individual
    parent2: Individual

    def less_adapted_parent(self) -> Individual:
        if self.parent1.is_more_adapted_than(self.parent2):
            return self.parent2
        return self.parent1


@dataclass(frozen=True)
class Solution:
    population: "Population"
    best_individual: Individual
    max_generations: int
    generation_count: int
    generations_without_improvement: int
    fitness_history: List[int] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    stopped_by: str = "max_generations"

    @property
    def best_fitness(self) -> int:
        return self.best_individual.fitness

    def __str__(self) -> str:
        order = [a.aircraft_id for a in self.best_individual.sequence]
        return (f"Solution cost: {self.best_individual.fitness}\n"
                f"Landing sequence: {order}\n"
                f"Generations: {self.generation_count}/{self.max_generations} "
                f"(stagnant: {self.generations_without_improvement}, stop: {self.stopped_by})")

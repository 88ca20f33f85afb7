import sys
import os
import random
import pytest

# --- garantir o pacote no path ---
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from atc_ga.aircraft import AircraftStaticData


def make_instance(n, spacing=30, gap=10, seed=0):
    """Instância pequena e viável: alvos espaçados, janelas largas."""
    rng = random.Random(seed)
    aircrafts = []
    for i in range(n):
        target = 100 + spacing * i
        aircrafts.append(AircraftStaticData(
            aircraft_id=i,
            appearance_time=target - 60,
            earliest_landing_time=target - 40,
            target_landing_time=target,
            latest_landing_time=target + 400,
            landing_before_target_penalty_cost=float(rng.randint(1, 3)),
            landing_after_target_penalty_cost=float(rng.randint(2, 6)),
            gap_times=tuple(0 if j == i else gap for j in range(n)),
        ))
    return aircrafts


def instance_text(aircrafts, freeze_time=None):
    linhas = [f"{len(aircrafts)}" + ("" if freeze_time is None else f" {freeze_time}")]
    for a in aircrafts:
        linhas.append(
            f" {a.appearance_time} {a.earliest_landing_time} {a.target_landing_time} "
            f"{a.latest_landing_time} {a.landing_before_target_penalty_cost:.2f} "
            f"{a.landing_after_target_penalty_cost:.2f}"
        )
        linhas.append(" " + " ".join(str(g) for g in a.gap_times))
    return "\n".join(linhas) + "\n"


# cenário com duas aeronaves: A (0, 10, 20) e B (5, 15, 25), separação 5
@pytest.fixture
def two_aircraft():
    a = AircraftStaticData(0, 0, 0, 10, 20, 1.0, 2.0, (0, 5))
    b = AircraftStaticData(1, 0, 5, 15, 25, 1.0, 2.0, (5, 0))
    return [a, b]


@pytest.fixture
def one_aircraft():
    return [AircraftStaticData(0, 0, 50, 60, 90, 3.0, 4.0, (0,))]


@pytest.fixture
def small_instance():
    return make_instance(8)


@pytest.fixture
def rng():
    return random.Random(1)


@pytest.fixture
def evaluator(small_instance):
    from atc_ga.evaluator import FitnessEvaluator
    return FitnessEvaluator(small_instance)


@pytest.fixture
def scheduler(rng):
    from atc_ga.scheduler import LandingTimeScheduler
    return LandingTimeScheduler(rng, random_time_window=10)


@pytest.fixture
def individual_creator(small_instance, evaluator, scheduler, rng):
    from atc_ga.sequences import LandingSequenceCreator, IndividualCreator
    return IndividualCreator(LandingSequenceCreator(small_instance, rng), evaluator, scheduler)


@pytest.fixture
def small_config():
    from atc_ga.population import PopulationConfig
    return PopulationConfig(max_individuals=10, reproduction_rate=0.4, mutation_rate=0.3)


@pytest.fixture
def instance_file(tmp_path, small_instance):
    path = tmp_path / "airland_small.txt"
    path.write_text(instance_text(small_instance, freeze_time=10), encoding="utf-8")
    return str(path)


# GA pequeno para executar rapidamente
@pytest.fixture
def ga_instance(small_instance, small_config):
    from atc_ga.ga import GeneticAlgorithm
    return GeneticAlgorithm(small_instance, small_config, max_generations=15, seed=1, n_workers=1)

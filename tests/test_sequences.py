import random
import pytest

from atc_ga.constants import INFEASIBLE_FITNESS
from atc_ga.exceptions import ConfigurationError
from atc_ga.sequences import LandingSequenceCreator, ORDERING_STRATEGIES


@pytest.fixture
def creator(small_instance):
    return LandingSequenceCreator(small_instance, random.Random(4))


def test_every_ordering_is_a_permutation_of_fresh_copies(creator, small_instance):
    ids = sorted(s.aircraft_id for s in small_instance)
    first = creator.create("random_order")
    for name in ORDERING_STRATEGIES:
        seq = creator.create(name)
        assert sorted(a.aircraft_id for a in seq) == ids
        # cópias novas a cada chamada, dados estáticos compartilhados
        assert all(a is not b for a in seq for b in first)
        assert {a.static for a in seq} == set(small_instance)


def test_sorted_orderings(creator):
    targets = [a.target_landing_time for a in creator.sorted_by_target_times()]
    assert targets == sorted(targets)

    latest = creator.sorted_by_latest_times()
    assert [a.landing_time for a in latest] == sorted(a.latest_landing_time for a in latest)

    costs = [a.static.landing_after_target_penalty_cost for a in creator.sorted_by_penalty_cost()]
    assert costs == sorted(costs, reverse=True)

    random_times = creator.sorted_by_random_times()
    times = [a.landing_time for a in random_times]
    assert times == sorted(times)
    assert all(a.earliest_landing_time <= a.landing_time <= a.target_landing_time for a in random_times)

    by_cost = [a.landing_cost() for a in creator.random_sorted_by_aircraft_cost()]
    assert by_cost == sorted(by_cost)

    assert all(a.landing_time == a.earliest_landing_time for a in creator.earliest_times())


def test_unknown_ordering(creator):
    with pytest.raises(ConfigurationError):
        creator.create("by_colour")


def test_individual_creator_scores_the_schedule(individual_creator, evaluator):
    ind = individual_creator.create("sorted_by_target_times", "target_from_begin")
    assert ind.fitness == evaluator.evaluate(ind.sequence)
    # instância da fixture permite todos no alvo
    assert ind.fitness == 0

    for name in ORDERING_STRATEGIES:
        ind = individual_creator.create(name, "random_from_begin")
        assert ind.fitness == evaluator.evaluate(ind.sequence)


def test_individual_creator_can_defer_evaluation(individual_creator):
    ind = individual_creator.create("random_order", evaluate=False)
    assert ind.fitness == INFEASIBLE_FITNESS
    assert len(ind) == 8

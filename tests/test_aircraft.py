import random
import pytest

from atc_ga.aircraft import Aircraft, AircraftStaticData
from atc_ga.exceptions import InstanceError


def test_default_landing_time_is_target(two_aircraft):
    a = Aircraft(two_aircraft[0])
    assert a.landing_time == 10
    assert a.in_landing_window()


def test_clone_shares_static_data(two_aircraft):
    a = Aircraft(two_aircraft[0], landing_time=12)
    c = a.clone()
    assert c.static is a.static
    c.landing_time = 3
    assert a.landing_time == 12


def test_respects_gap_after():
    # anterior em 100, separação 15
    prev = Aircraft(AircraftStaticData(0, 0, 50, 100, 300, 1.0, 1.0, (0, 15)))
    cur = Aircraft(AircraftStaticData(1, 0, 50, 115, 300, 1.0, 1.0, (15, 0)))
    assert cur.respects_gap_after(prev)
    cur.landing_time = 114
    assert not cur.respects_gap_after(prev)
    cur.set_min_landing_time_after(prev)
    assert cur.landing_time == 115


def test_landing_cost_asymmetric(two_aircraft):
    a = Aircraft(two_aircraft[0])
    a.landing_time = 7
    assert a.landing_cost() == 3.0
    a.landing_time = 13
    assert a.landing_cost() == 6.0
    a.set_target_landing_time()
    assert a.landing_cost() == 0.0


def test_random_landing_time_inside_clamped_window(two_aircraft):
    rng = random.Random(3)
    a = Aircraft(two_aircraft[0])  # janela [0, 20], alvo 10
    for _ in range(200):
        a.set_random_landing_time(rng, delta=15)
        assert 0 <= a.landing_time <= 20
        a.set_random_landing_time(rng, delta=2)
        assert 8 <= a.landing_time <= 12
        a.set_random_landing_time_before_target(rng)
        assert 0 <= a.landing_time <= 10


def test_static_data_validation():
    with pytest.raises(InstanceError):
        AircraftStaticData(0, 0, 20, 10, 30, 1.0, 1.0, (0,))
    with pytest.raises(InstanceError):
        AircraftStaticData(0, 0, 0, 10, 30, -1.0, 1.0, (0,))
    s = AircraftStaticData(0, 0, 0, 10, 30, 1.0, 1.0, [0])
    assert s.gap_times == (0,)

import pytest

from atc_ga.exceptions import InstanceError
from atc_ga.io_instance import parse_instance, load_instance, schedule_to_dataframe, write_schedule_csv

from conftest import instance_text


def test_parse_with_and_without_freeze_time(small_instance):
    with_freeze = parse_instance(instance_text(small_instance, freeze_time=10))
    without = parse_instance(instance_text(small_instance))
    assert with_freeze == small_instance
    assert without == small_instance


def test_parse_two_aircraft_text():
    text = """2 0
 0 0 10 20 1.00 2.00
 0 5
 0 5 15 25 1.00 2.00
 5 0
"""
    a, b = parse_instance(text)
    assert (a.earliest_landing_time, a.target_landing_time, a.latest_landing_time) == (0, 10, 20)
    assert b.gap_after(0) == 5
    assert a.landing_after_target_penalty_cost == 2.0


@pytest.mark.parametrize("text", [
    "",
    "2 0 1 2 3",
    "1 0 0 x 10 20 1 1 0",
    "1 0 0 0 10.5 20 1 1 0",
    "1.5 0",
])
def test_malformed_instances(text):
    with pytest.raises(InstanceError):
        parse_instance(text)


def test_load_instance(instance_file, small_instance):
    assert load_instance(instance_file) == small_instance
    with pytest.raises(InstanceError):
        load_instance(instance_file + ".missing")


def test_schedule_export(tmp_path, individual_creator):
    ind = individual_creator.create("random_order", "random_from_begin")
    df = schedule_to_dataframe(ind)
    assert list(df["aircraft_id"]) == [a.aircraft_id for a in ind.sequence]
    assert (df["deviation"] == df["landing_time"] - df["target"]).all()
    if ind.is_feasible():
        assert round(df["cost"].sum()) == ind.fitness

    out = tmp_path / "schedule.csv"
    write_schedule_csv(ind, str(out))
    assert out.exists()
    header = out.read_text(encoding="utf-8").splitlines()[0]
    assert header.startswith("aircraft_id,earliest,target,latest,landing_time")

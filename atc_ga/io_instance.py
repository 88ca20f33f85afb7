# atc_ga/io_instance.py
"""Instance loading and schedule export. Not used by the GA itself."""
from typing import List

import numpy as np
import pandas as pd

from .aircraft import AircraftStaticData
from .exceptions import InstanceError
from .model import Individual

SCHEDULE_COLUMNS = ["aircraft_id", "earliest", "target", "latest", "landing_time", "deviation", "cost"]


def parse_instance(text: str) -> List[AircraftStaticData]:
    """Parse an OR-Library "airland" instance.

    Layout: aircraft count, an optional freeze time, then for each aircraft
    appearance, earliest, target, latest, cost before, cost after and one
    separation time per aircraft.
    """
    try:
        tokens = np.array(text.split(), dtype=np.float64)
    except ValueError as e:
        raise InstanceError(f"non-numeric value in instance: {e}") from e
    if tokens.size == 0:
        raise InstanceError("empty instance")

    n = int(tokens[0])
    if n < 0 or tokens[0] != n:
        raise InstanceError(f"invalid aircraft count: {tokens[0]}")
    record = 6 + n
    if tokens.size == 2 + n * record:
        offset = 2
    elif tokens.size == 1 + n * record:
        offset = 1
    else:
        raise InstanceError(
            f"expected {1 + n * record} or {2 + n * record} values for {n} aircraft, got {tokens.size}"
        )

    body = tokens[offset:].reshape(n, record)
    times = body[:, :4]
    gaps = body[:, 6:]
    if not (np.all(times == np.round(times)) and np.all(gaps == np.round(gaps))):
        raise InstanceError("landing times and separation times must be integers")

    aircrafts = []
    for i in range(n):
        row = body[i]
        aircrafts.append(AircraftStaticData(
            aircraft_id=i,
            appearance_time=int(row[0]),
            earliest_landing_time=int(row[1]),
            target_landing_time=int(row[2]),
            latest_landing_time=int(row[3]),
            landing_before_target_penalty_cost=float(row[4]),
            landing_after_target_penalty_cost=float(row[5]),
            gap_times=tuple(int(g) for g in row[6:]),
        ))
    return aircrafts


def load_instance(path: str) -> List[AircraftStaticData]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise InstanceError(f"could not read instance file {path}: {e}") from e
    return parse_instance(text)


def schedule_to_dataframe(individual: Individual) -> pd.DataFrame:
    """One row per aircraft, in landing order."""
    linhas = []
    for aircraft in individual.sequence:
        s = aircraft.static
        linhas.append([
            s.aircraft_id, s.earliest_landing_time, s.target_landing_time, s.latest_landing_time,
            aircraft.landing_time, aircraft.landing_time - s.target_landing_time, aircraft.landing_cost(),
        ])
    return pd.DataFrame(linhas, columns=SCHEDULE_COLUMNS)


def write_schedule_csv(individual: Individual, arquivo_saida: str = "schedule.csv") -> pd.DataFrame:
    df = schedule_to_dataframe(individual)
    df.to_csv(arquivo_saida, index=False)
    return df

# atc_ga/evaluator.py
import math
import numpy as np
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence
from numba import njit

from .aircraft import Aircraft, AircraftStaticData
from .constants import INFEASIBLE_FITNESS, WORKERS, FIT_CACHE_MAX_ENTRIES
from .exceptions import InstanceError
from .utils import FitnessCache, hash_sequence


@njit(cache=True, nogil=True)
def evaluate_sequence_numba(order, times, earliest, target, latest,
                            before_cost, after_cost, gap_matrix, infeasible):
    total = 0.0
    for i in range(order.shape[0]):
        a = order[i]
        t = times[i]
        if t < earliest[a] or t > latest[a]:
            return infeasible
        if i > 0:
            # gap_matrix[a, p]: separação exigida quando p pousa imediatamente antes de a
            p = order[i - 1]
            if t < times[i - 1] + gap_matrix[a, p]:
                return infeasible
        if t < target[a]:
            total += before_cost[a] * (target[a] - t)
        else:
            total += after_cost[a] * (t - target[a])
    return np.int64(math.floor(total + 0.5))


@njit(cache=True, nogil=True)
def evaluate_batch_numba(orders, times, earliest, target, latest,
                         before_cost, after_cost, gap_matrix, infeasible):
    B = orders.shape[0]
    fits = np.zeros(B, dtype=np.int64)
    for b in range(B):
        fits[b] = evaluate_sequence_numba(
            orders[b], times[b], earliest, target, latest,
            before_cost, after_cost, gap_matrix, infeasible
        )
    return fits


class FitnessEvaluator:
    """Scores landing sequences: total earliness/lateness penalty, or
    ``INFEASIBLE_FITNESS`` when a window or a separation is violated.

    The static data of the instance is packed once into contiguous arrays
    consumed by the numba kernels above. Aircraft ids must be ``0..n-1``.
    """

    def __init__(self, aircrafts: Sequence[AircraftStaticData],
                 n_workers: int = WORKERS, cache_size: int = FIT_CACHE_MAX_ENTRIES):
        n = len(aircrafts)
        ids = sorted(a.aircraft_id for a in aircrafts)
        if ids != list(range(n)):
            raise InstanceError("aircraft ids must be exactly 0..n-1")
        by_id = sorted(aircrafts, key=lambda a: a.aircraft_id)
        for a in by_id:
            if len(a.gap_times) != n:
                raise InstanceError(
                    f"aircraft {a.aircraft_id}: expected {n} gap times, got {len(a.gap_times)}"
                )

        self.n = n
        self.n_workers = max(1, int(n_workers))
        self.earliest = np.ascontiguousarray([a.earliest_landing_time for a in by_id], dtype=np.int64)
        self.target = np.ascontiguousarray([a.target_landing_time for a in by_id], dtype=np.int64)
        self.latest = np.ascontiguousarray([a.latest_landing_time for a in by_id], dtype=np.int64)
        self.before_cost = np.ascontiguousarray(
            [a.landing_before_target_penalty_cost for a in by_id], dtype=np.float64)
        self.after_cost = np.ascontiguousarray(
            [a.landing_after_target_penalty_cost for a in by_id], dtype=np.float64)
        self.gap_matrix = np.ascontiguousarray(
            np.array([a.gap_times for a in by_id], dtype=np.int64).reshape(n, n))
        self.fitness_cache = FitnessCache(cache_size)
        self.evaluations = 0

    @staticmethod
    def _as_arrays(sequence: Sequence[Aircraft]):
        n = len(sequence)
        order = np.fromiter((a.aircraft_id for a in sequence), dtype=np.int64, count=n)
        times = np.fromiter((a.landing_time for a in sequence), dtype=np.int64, count=n)
        return order, times

    def evaluate(self, sequence: Sequence[Aircraft]) -> int:
        """Cost of ``sequence`` in landing order. Pure; no caching."""
        order, times = self._as_arrays(sequence)
        self.evaluations += 1
        return int(evaluate_sequence_numba(
            order, times, self.earliest, self.target, self.latest,
            self.before_cost, self.after_cost, self.gap_matrix,
            np.int64(INFEASIBLE_FITNESS)
        ))

    def _evaluate_chunk(self, individuals) -> List[int]:
        B = len(individuals)
        orders = np.zeros((B, self.n), dtype=np.int64)
        times = np.zeros((B, self.n), dtype=np.int64)
        keys = [None] * B
        results = [None] * B
        uncached = []

        for b, ind in enumerate(individuals):
            orders[b], times[b] = self._as_arrays(ind.sequence)
            keys[b] = hash_sequence(orders[b], times[b])
            cached = self.fitness_cache.lookup(keys[b])
            if cached is not None:
                results[b] = cached
            else:
                uncached.append(b)

        if uncached:
            fits = evaluate_batch_numba(
                orders[uncached], times[uncached],
                self.earliest, self.target, self.latest,
                self.before_cost, self.after_cost, self.gap_matrix,
                np.int64(INFEASIBLE_FITNESS)
            )
            for i_local, b in enumerate(uncached):
                fit = int(fits[i_local])
                self.fitness_cache.store(keys[b], fit)
                results[b] = fit
        return results

    def evaluate_individuals(self, individuals) -> List[int]:
        """Evaluate many individuals at once and store each ``fitness``.

        Chunks run on a thread pool; the kernels release the GIL.
        """
        individuals = list(individuals)
        if not individuals:
            return []
        if self.n == 0:
            for ind in individuals:
                ind.fitness = 0
            return [0] * len(individuals)

        batch_size = max(1, math.ceil(len(individuals) / self.n_workers))
        chunks = [individuals[i:i + batch_size] for i in range(0, len(individuals), batch_size)]
        resultados = []
        if len(chunks) == 1:
            resultados = self._evaluate_chunk(chunks[0])
        else:
            with ThreadPoolExecutor(max_workers=self.n_workers) as ex:
                futures = [ex.submit(self._evaluate_chunk, c) for c in chunks]
                for f in futures:
                    resultados.extend(f.result())

        self.evaluations += len(individuals)
        for ind, fit in zip(individuals, resultados):
            ind.fitness = fit
        return resultados

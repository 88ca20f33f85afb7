# atc_ga/utils.py
import threading
from collections import OrderedDict
import hashlib
from typing import Optional

import numpy as np

from .constants import FIT_CACHE_MAX_ENTRIES, FIT_CACHE_DIGEST_BYTES


def hash_sequence(order: np.ndarray, times: np.ndarray, digest_size: int = FIT_CACHE_DIGEST_BYTES) -> bytes:
    """Key for a landing sequence: aircraft order plus landing times."""
    h = hashlib.blake2b(digest_size=digest_size)
    h.update(np.ascontiguousarray(order, dtype=np.int64).tobytes())
    h.update(b'|')
    h.update(np.ascontiguousarray(times, dtype=np.int64).tobytes())
    return h.digest()


class FitnessCache:
    """Thread-safe LRU map from sequence hash to fitness value."""

    def __init__(self, maxsize: int = FIT_CACHE_MAX_ENTRIES):
        self.maxsize = int(maxsize)
        self.hits = 0
        self.misses = 0
        self._od = OrderedDict()
        self._lock = threading.Lock()

    def lookup(self, key: bytes) -> Optional[int]:
        with self._lock:
            val = self._od.get(key)
            if val is None:
                self.misses += 1
                return None
            self._od.move_to_end(key)
            self.hits += 1
            return val

    def store(self, key: bytes, fitness: int):
        if self.maxsize <= 0:
            return
        with self._lock:
            self._od[key] = fitness
            self._od.move_to_end(key)
            while len(self._od) > self.maxsize:
                self._od.popitem(last=False)

    def clear(self):
        with self._lock:
            self._od.clear()
            self.hits = self.misses = 0

    def __len__(self):
        with self._lock:
            return len(self._od)

import threading
import numpy as np

from atc_ga.utils import FitnessCache, hash_sequence


def test_fitness_cache_lru():
    c = FitnessCache(maxsize=2)
    c.store(b"a", 1)
    c.store(b"b", 2)
    assert c.lookup(b"a") == 1
    c.store(b"c", 3)
    # "b" foi o menos usado
    assert c.lookup(b"b") is None
    assert c.lookup(b"c") == 3
    assert len(c) == 2
    assert c.hits == 2 and c.misses == 1
    c.clear()
    assert len(c) == 0 and c.hits == 0


def test_zero_fitness_is_cached():
    c = FitnessCache(maxsize=4)
    c.store(b"k", 0)
    assert c.lookup(b"k") == 0


def test_cache_thread_safety():
    c = FitnessCache(maxsize=100)
    def writer(i):
        for j in range(100):
            c.store(f"{i}-{j}".encode(), j)
    threads = [threading.Thread(target=writer, args=(i,)) for i in range(5)]
    for t in threads: t.start()
    for t in threads: t.join()
    assert len(c) <= 100


def test_hash_sequence_consistency():
    order = np.array([0, 1, 2])
    a = hash_sequence(order, np.array([10, 20, 30]))
    b = hash_sequence(order.copy(), np.array([10, 20, 30]))
    assert a == b
    assert a != hash_sequence(np.array([1, 0, 2]), np.array([10, 20, 30]))
    assert a != hash_sequence(order, np.array([10, 20, 31]))

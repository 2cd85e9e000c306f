"""Tests for the per-thread random generators."""

import threading
from typing import Dict, List

import numpy as np
import pytest

from vecmath import Vector, rng
from vecmath.config import RandomConfig


@pytest.fixture(autouse=True)
def reset_random_config():
    rng.configure(RandomConfig())
    yield
    rng.configure(RandomConfig())


def test_generator_is_reused_within_a_thread() -> None:
    assert rng.get_generator() is rng.get_generator()


def test_each_thread_gets_its_own_generator() -> None:
    seen: Dict[str, np.random.Generator] = {}

    def worker(name: str) -> None:
        seen[name] = rng.get_generator()

    threads = [threading.Thread(target=worker, args=(f"t{i}",)) for i in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    generators = list(seen.values()) + [rng.get_generator()]
    assert len({id(g) for g in generators}) == 4


def test_seed_generator_is_reproducible() -> None:
    rng.seed_generator(123)
    first = Vector.random_uniform(6)
    rng.seed_generator(123)
    second = Vector.random_uniform(6)
    assert first == second


def test_configured_seed_reproduces_sequences() -> None:
    rng.configure(RandomConfig(seed=7))
    first = Vector.random_normal(4)
    rng.configure(RandomConfig(seed=7))
    second = Vector.random_normal(4)
    assert first == second


def test_configured_seed_gives_threads_distinct_streams() -> None:
    rng.configure(RandomConfig(seed=99))
    results: List[Vector] = []
    lock = threading.Lock()

    def worker() -> None:
        v = Vector.random_uniform(8)
        with lock:
            results.append(v)

    threads = [threading.Thread(target=worker) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 2
    assert results[0] != results[1]

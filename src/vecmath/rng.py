"""Per-thread random generators.

Each thread lazily gets its own ``numpy.random.Generator`` so concurrent
callers never share generator state. With a configured seed, every thread's
generator is seeded from a distinct child of one root ``SeedSequence``.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Optional

import numpy as np

from vecmath.utils import get_logger

if TYPE_CHECKING:
    from vecmath.config.models import RandomConfig

logger = get_logger("rng")

_local = threading.local()
_root_lock = threading.Lock()
_root_seed: Optional[np.random.SeedSequence] = None


def _new_generator() -> np.random.Generator:
    with _root_lock:
        root = _root_seed
        child = root.spawn(1)[0] if root is not None else None
    if child is None:
        logger.debug(f"Creating unseeded generator for thread {threading.get_ident()}")
        return np.random.default_rng()
    logger.debug(f"Creating seeded generator for thread {threading.get_ident()} (spawn key {child.spawn_key})")
    return np.random.default_rng(child)


def get_generator() -> np.random.Generator:
    """Return the calling thread's generator, creating it on first use."""
    generator = getattr(_local, "generator", None)
    if generator is None:
        generator = _new_generator()
        _local.generator = generator
    return generator


def seed_generator(seed: int) -> np.random.Generator:
    """Replace the calling thread's generator with one seeded from ``seed``."""
    generator = np.random.default_rng(seed)
    _local.generator = generator
    logger.debug(f"Thread {threading.get_ident()} generator reseeded with {seed}")
    return generator


def configure(config: RandomConfig) -> None:
    """
    Apply a RandomConfig.

    Threads that have not drawn yet pick up the new root seed on first use;
    the calling thread's generator is discarded so it does too.
    """
    global _root_seed
    with _root_lock:
        _root_seed = np.random.SeedSequence(config.seed) if config.seed is not None else None
    _local.generator = None
    logger.info(f"Random generators configured (seed={config.seed})")

from __future__ import annotations

import os
import random
from typing import Dict

import numpy as np

# Relative tolerance when re-measuring a stored tour length.
TOL_NUM: float = 1e-6

RNG_SEEDS: Dict[str, int] = {
    "tests": 1337,
    "bench": 4242,
}


def seed_everywhere(seed: int) -> None:
    """Seed ``random``, numpy's global RNG and ``PYTHONHASHSEED``."""
    random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)
    np.random.seed(seed)


__all__ = [
    "TOL_NUM",
    "RNG_SEEDS",
    "seed_everywhere",
]

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from bitonic_tour import geometry
from bitonic_tour.common.constants import (
    RNG_SEEDS,
    seed_everywhere,
)


TEST_SEED = RNG_SEEDS["tests"]
seed_everywhere(TEST_SEED)

settings.register_profile(
    "ci",
    max_examples=60,
    deadline=None,
    derandomize=True,
    print_blob=True,
    suppress_health_check=(
        HealthCheck.filter_too_much,
        HealthCheck.too_slow,
    ),
)
settings.load_profile("ci")


@pytest.fixture(autouse=True)
def _quiet_trace():
    geometry.VERBOSE = False
    yield
    geometry.VERBOSE = False

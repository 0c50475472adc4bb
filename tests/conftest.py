import io
import os

import pytest
from hypothesis import HealthCheck, settings

# Default profile for local runs and CI
settings.register_profile(
    "ci",
    max_examples=200,
    deadline=200,
    suppress_health_check=[HealthCheck.too_slow],
    print_blob=True,
)

# Quick profile: fewer examples, stable sequence
settings.register_profile(
    "quick",
    max_examples=25,
    deadline=100,
    suppress_health_check=[HealthCheck.too_slow],
    derandomize=True,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


@pytest.fixture
def debug_stream():
    return io.StringIO()

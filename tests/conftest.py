import os

import pytest
from hypothesis import HealthCheck, settings

from sdn import parse

# Hypothesis profiles:
# - "dev" (default): quick runs while editing
# - "ci": more examples; select with SDN_HYPOTHESIS_PROFILE=ci
settings.register_profile("dev", max_examples=100)
settings.register_profile(
    "ci", max_examples=1000, suppress_health_check=[HealthCheck.too_slow], deadline=None
)
settings.load_profile(os.environ.get("SDN_HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def parse_one():
    """Parse source that must contain exactly one top-level value."""
    def _parse_one(source):
        values = parse(source)
        assert len(values) == 1, f"expected one value in {source!r}, got {values!r}"
        return values[0]
    return _parse_one

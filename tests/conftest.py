import pytest

from quarter_ratio import DistributedRatio


@pytest.fixture
def make_service():
    """Build a DistributedRatio from keyword settings"""
    def _make(**settings):
        return DistributedRatio(**settings)
    return _make


@pytest.fixture
def service():
    return DistributedRatio()


@pytest.fixture
def priors():
    return [{"value": 34}, {"value": 132}, {"value": 11}, {"value": 91}]
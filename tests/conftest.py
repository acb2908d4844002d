import pytest

from parking_lot.state.spot_registry import SpotRegistry


@pytest.fixture
def registry() -> SpotRegistry:
    return SpotRegistry(10)


@pytest.fixture
def small_registry() -> SpotRegistry:
    return SpotRegistry(3)

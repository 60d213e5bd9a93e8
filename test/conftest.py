import pytest

import optscan.registry


@pytest.fixture
def registry() -> optscan.registry.Registry:
    return optscan.registry.Registry()


@pytest.fixture
def value_registry(registry) -> optscan.registry.Registry:
    registry.register("test", "test", "t", usage="value option")
    return registry


@pytest.fixture
def bool_registry(registry) -> optscan.registry.Registry:
    registry.register("a", "all", "a", is_bool=True)
    registry.register("b", "brief", "b", is_bool=True)
    registry.register("c", "color", "c", is_bool=True)
    return registry

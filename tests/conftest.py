"""Pytest configuration and shared fixtures."""

import pytest

from modreg.config import ConfigRegistry, MemoryStore
from modreg.factories import FactoryRegistry
from modreg.gates import FeatureManager
from modreg.registration import HostRegistry


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def configs() -> ConfigRegistry:
    return ConfigRegistry()


@pytest.fixture
def features() -> FeatureManager:
    return FeatureManager()


@pytest.fixture
def target() -> HostRegistry:
    return HostRegistry()


@pytest.fixture
def item_factories() -> FactoryRegistry:
    return FactoryRegistry("items")


@pytest.fixture
def block_factories() -> FactoryRegistry:
    return FactoryRegistry("blocks")

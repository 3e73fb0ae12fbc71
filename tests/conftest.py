import pytest

from mongoql.definer import TypeDefiner
from mongoql.registry import ModelRegistry


@pytest.fixture()
def registry():
    return ModelRegistry()


@pytest.fixture()
def definer(registry):
    return TypeDefiner(registry)

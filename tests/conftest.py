import pytest

from balind.factories.schemas import FactoryBinding, FactorySchema, get_binding_by_schema

from builders import addr


@pytest.fixture
def pool() -> bytes:
    return addr(0x50)


@pytest.fixture
def tokens() -> list[bytes]:
    return [addr(0x01), addr(0x02)]


@pytest.fixture
def weighted_v1() -> FactoryBinding:
    return get_binding_by_schema(FactorySchema.WEIGHTED_POOL_FACTORY_V1)


@pytest.fixture
def composable_stable() -> FactoryBinding:
    return get_binding_by_schema(FactorySchema.COMPOSABLE_STABLE_POOL_FACTORY)

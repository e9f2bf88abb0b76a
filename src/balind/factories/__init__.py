"""Balancer v2 pool factory dispatch.

This package provides:
- The schema table binding factory addresses to their layouts (schemas)
- The dispatcher building a ProtocolComponent from a factory `create` (dispatcher)
"""

from balind.factories.dispatcher import address_map, get_pool_registered, get_tokens_registered
from balind.factories.schemas import (
    FACTORY_TABLE,
    UNSUPPORTED_FACTORIES,
    FactoryBinding,
    FactorySchema,
    UnsupportedFactory,
    get_binding,
    get_binding_by_schema,
)

__all__ = [
    "address_map",
    "get_pool_registered",
    "get_tokens_registered",
    "FACTORY_TABLE",
    "UNSUPPORTED_FACTORIES",
    "FactoryBinding",
    "FactorySchema",
    "UnsupportedFactory",
    "get_binding",
    "get_binding_by_schema",
]

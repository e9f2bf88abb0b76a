from __future__ import annotations

from .core.config import DEFAULT_CONFIG, PROTOCOL_TYPE_NAME, VAULT_ADDRESS, DispatcherConfig
from .core.errors import AmbiguousCorrelationError, BalindError, InconsistentTransactionError
from .core.models import Block, Call, Log, ProtocolComponent, TransactionTrace
from .core.use_cases.map_components import map_components
from .factories.dispatcher import address_map
from .factories.schemas import FACTORY_TABLE, UNSUPPORTED_FACTORIES, FactorySchema

__all__ = [
    "address_map",
    "map_components",
    "FACTORY_TABLE",
    "UNSUPPORTED_FACTORIES",
    "FactorySchema",
    "DEFAULT_CONFIG",
    "PROTOCOL_TYPE_NAME",
    "VAULT_ADDRESS",
    "DispatcherConfig",
    "AmbiguousCorrelationError",
    "BalindError",
    "InconsistentTransactionError",
    "Block",
    "Call",
    "Log",
    "ProtocolComponent",
    "TransactionTrace",
]

"""Core data models, configuration, errors and interfaces.

This package provides:
- Trace models (Log, Call, TransactionTrace, Block)
- Normalized output models (ProtocolComponent and its groupings)
- Dispatcher configuration (DispatcherConfig) and fixed constants
- Error taxonomy for inconsistent transactions
"""

from balind.core.config import DEFAULT_CONFIG, PROTOCOL_TYPE_NAME, VAULT_ADDRESS, DispatcherConfig
from balind.core.errors import AmbiguousCorrelationError, BalindError, InconsistentTransactionError
from balind.core.models import (
    Attribute,
    Block,
    BlockTransactionProtocolComponents,
    Call,
    ChangeType,
    FinancialType,
    ImplementationType,
    Log,
    ProtocolComponent,
    ProtocolType,
    TransactionProtocolComponents,
    TransactionTrace,
)

__all__ = [
    "DEFAULT_CONFIG",
    "PROTOCOL_TYPE_NAME",
    "VAULT_ADDRESS",
    "DispatcherConfig",
    "AmbiguousCorrelationError",
    "BalindError",
    "InconsistentTransactionError",
    "Attribute",
    "Block",
    "BlockTransactionProtocolComponents",
    "Call",
    "ChangeType",
    "FinancialType",
    "ImplementationType",
    "Log",
    "ProtocolComponent",
    "ProtocolType",
    "TransactionProtocolComponents",
    "TransactionTrace",
]

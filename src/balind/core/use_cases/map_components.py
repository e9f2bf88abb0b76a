"""Block mapping use case: run the factory dispatcher over whole blocks.

Each transaction is handled on its own; the components it creates are
grouped under its hash, and transactions that create nothing are dropped.
"""

from __future__ import annotations

import logging

from balind.core.config import DEFAULT_CONFIG, DispatcherConfig
from balind.core.interfaces import IComponentSink
from balind.core.models import (
    Block,
    BlockTransactionProtocolComponents,
    ProtocolComponent,
    TransactionProtocolComponents,
    TransactionTrace,
)
from balind.factories.dispatcher import address_map

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Per-transaction extraction
# ---------------------------------------------------------------------------


def components_from_transaction(
    tx: TransactionTrace,
    *,
    config: DispatcherConfig = DEFAULT_CONFIG,
) -> list[ProtocolComponent]:
    """
    Run the dispatcher over every (log, call) pair of one transaction.

    The callee of each call is taken as the factory address. Calls whose
    state was reverted never created anything; `logs_with_calls` leaves them out.
    """
    components: list[ProtocolComponent] = []
    for log, call in tx.logs_with_calls():
        component = address_map(call.address, log, call, tx, config=config)
        if component is not None:
            components.append(component)
    return components


# ---------------------------------------------------------------------------
# Per-block extraction
# ---------------------------------------------------------------------------


def map_components(
    block: Block,
    *,
    config: DispatcherConfig = DEFAULT_CONFIG,
) -> BlockTransactionProtocolComponents:
    """
    Collect the components created in `block`, grouped by transaction.

    Transactions without any component are left out. Errors raised by the
    dispatcher (inconsistent transactions) propagate unchanged.
    """
    out = BlockTransactionProtocolComponents(block_number=block.number)
    for tx in block.transactions:
        components = components_from_transaction(tx, config=config)
        if components:
            out.tx_components.append(
                TransactionProtocolComponents(
                    tx_hash=tx.hash,
                    tx_index=tx.index,
                    components=tuple(components),
                )
            )
    logger.debug(
        "block %d: %d components across %d transactions",
        block.number, out.size(), len(out.tx_components),
    )
    return out


def map_and_emit(
    block: Block,
    sink: IComponentSink,
    *,
    config: DispatcherConfig = DEFAULT_CONFIG,
) -> BlockTransactionProtocolComponents:
    """Map `block` and hand the result to `sink`."""
    block_components = map_components(block, config=config)
    sink.emit(block_components)
    return block_components

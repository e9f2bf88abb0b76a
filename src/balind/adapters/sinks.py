from __future__ import annotations

import json
from typing import TextIO

from balind.core.interfaces import IComponentSink
from balind.core.models import BlockTransactionProtocolComponents, to_hex


class StreamComponentSink(IComponentSink):
    """
    Write one JSON line per component to a text stream.

    Each line is the component's `to_dict()` extended with the block number,
    transaction hash and transaction index it was created in.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.emitted = 0

    def emit(self, block_components: BlockTransactionProtocolComponents) -> None:
        for tx in block_components.tx_components:
            for component in tx.components:
                record = {
                    "block_number": block_components.block_number,
                    "tx_hash": to_hex(tx.tx_hash),
                    "tx_index": tx.tx_index,
                    **component.to_dict(),
                }
                self._stream.write(json.dumps(record, separators=(",", ":")) + "\n")
                self.emitted += 1
        self._stream.flush()


class InMemoryComponentSink(IComponentSink):
    """Keep every emitted block result in a list."""

    def __init__(self) -> None:
        self.blocks: list[BlockTransactionProtocolComponents] = []

    def emit(self, block_components: BlockTransactionProtocolComponents) -> None:
        self.blocks.append(block_components)

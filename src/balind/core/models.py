"""Core data models: trace inputs and normalized protocol components.

This module defines:
- `Log` / `Call` / `TransactionTrace` / `Block`: read-only trace records handed
   over by the upstream trace decoder.
- `Attribute` / `ProtocolType` / `ProtocolComponent`: the normalized record
   produced for each recognized pool creation.
- `TransactionProtocolComponents` / `BlockTransactionProtocolComponents`:
   per-transaction grouping of produced components.

Design notes
------------
- Addresses, topics, hashes and attribute values are raw `bytes`.
- Every record is frozen and uses tuples, so equal inputs give equal records.
- JSON output renders bytes as lowercase `0x`-prefixed hex.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


def to_hex(value: bytes) -> str:
    """Render raw bytes as lowercase `0x`-prefixed hex."""
    return "0x" + value.hex()


# === Trace records (input) ===


@dataclass(slots=True, frozen=True)
class Log:
    """One log emitted during a call."""

    address: bytes  # 20 bytes
    topics: tuple[bytes, ...]  # 32 bytes each
    data: bytes
    index: int = 0


@dataclass(slots=True, frozen=True)
class Call:
    """One call frame of a transaction trace with the logs it emitted."""

    address: bytes  # callee
    input: bytes  # 4-byte selector + ABI encoded arguments
    logs: tuple[Log, ...] = ()
    state_reverted: bool = False
    index: int = 0


@dataclass(slots=True, frozen=True)
class TransactionTrace:
    """All calls (and their logs) of one transaction."""

    hash: bytes
    calls: tuple[Call, ...] = ()
    index: int = 0

    def logs_with_calls(self) -> Iterator[tuple[Log, Call]]:
        """Yield each log paired with the call that emitted it, ordered by log index.

        Logs of reverted calls were rolled back and are never yielded.
        """
        pairs = [(log, call) for call in self.calls if not call.state_reverted for log in call.logs]
        pairs.sort(key=lambda pair: pair[0].index)
        yield from pairs


@dataclass(slots=True, frozen=True)
class Block:
    """A block's transaction traces."""

    number: int
    hash: bytes
    transactions: tuple[TransactionTrace, ...] = ()


# === Normalized component (output) ===


class ChangeType(str, Enum):
    CREATION = "creation"
    UPDATE = "update"
    DELETION = "deletion"


class FinancialType(str, Enum):
    SWAP = "swap"


class ImplementationType(str, Enum):
    """How swaps against a component are computed downstream."""

    VM = "vm"  # simulated against contract bytecode
    CUSTOM = "custom"  # computed by a native, analytical implementation


@dataclass(slots=True, frozen=True)
class Attribute:
    name: str
    value: bytes
    change: ChangeType = ChangeType.CREATION


@dataclass(slots=True, frozen=True)
class ProtocolType:
    name: str
    financial_type: FinancialType = FinancialType.SWAP
    implementation_type: ImplementationType = ImplementationType.VM


@dataclass(slots=True, frozen=True)
class ProtocolComponent:
    """A newly created pool, normalized for the downstream sink."""

    id: str  # "0x" + hex of the vault pool id
    tokens: tuple[bytes, ...]
    contracts: tuple[bytes, ...]
    static_att: tuple[Attribute, ...]
    protocol_type: ProtocolType
    change: ChangeType = ChangeType.CREATION

    def attribute(self, name: str) -> bytes | None:
        """Return the raw value of the named static attribute, if present."""
        for att in self.static_att:
            if att.name == name:
                return att.value
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "tokens": [to_hex(t) for t in self.tokens],
            "contracts": [to_hex(c) for c in self.contracts],
            "static_att": [
                {"name": a.name, "value": to_hex(a.value), "change": a.change.value}
                for a in self.static_att
            ],
            "change": self.change.value,
            "protocol_type": {
                "name": self.protocol_type.name,
                "financial_type": self.protocol_type.financial_type.value,
                "implementation_type": self.protocol_type.implementation_type.value,
            },
        }

    def to_json_line(self) -> str:
        """Serialize as a compact JSON line."""
        return json.dumps(self.to_dict(), separators=(",", ":")) + "\n"


@dataclass(slots=True, frozen=True)
class TransactionProtocolComponents:
    """Components created by a single transaction."""

    tx_hash: bytes
    tx_index: int
    components: tuple[ProtocolComponent, ...]


@dataclass(slots=True)
class BlockTransactionProtocolComponents:
    """Per-transaction component groups for one block, in block order."""

    block_number: int
    tx_components: list[TransactionProtocolComponents] = field(default_factory=list)

    def size(self) -> int:
        """Number of components across all transactions."""
        return sum(len(t.components) for t in self.tx_components)

"""JSON trace documents → core models.

A trace document describes one block::

    {
      "number": 123,
      "hash": "0x...",
      "transactions": [
        {"hash": "0x...", "index": 0, "calls": [
          {"address": "0x...", "input": "0x...", "state_reverted": false, "index": 0,
           "logs": [{"address": "0x...", "topics": ["0x..."], "data": "0x...", "index": 0}]}
        ]}
      ]
    }

Hex strings are validated by pydantic and converted to raw bytes.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

from eth_utils import decode_hex, is_hex
from pydantic import AfterValidator, BaseModel

from balind.core.models import Block, Call, Log, TransactionTrace


def _check_hex(value: str) -> str:
    if not is_hex(value) or len(value.removeprefix("0x").removeprefix("0X")) % 2:
        raise ValueError(f"not an even-length hex string: {value!r}")
    return value


def _check_address(value: str) -> str:
    _check_hex(value)
    if len(decode_hex(value)) != 20:
        raise ValueError(f"address must be 20 bytes: {value!r}")
    return value


def _check_word(value: str) -> str:
    _check_hex(value)
    if len(decode_hex(value)) != 32:
        raise ValueError(f"topic/hash must be 32 bytes: {value!r}")
    return value


HexStr = Annotated[str, AfterValidator(_check_hex)]
AddressStr = Annotated[str, AfterValidator(_check_address)]
WordStr = Annotated[str, AfterValidator(_check_word)]


class LogModel(BaseModel):
    address: AddressStr
    topics: Sequence[WordStr]
    data: HexStr = "0x"
    index: int = 0

    def to_domain(self) -> Log:
        return Log(
            address=decode_hex(self.address),
            topics=tuple(decode_hex(t) for t in self.topics),
            data=decode_hex(self.data),
            index=self.index,
        )


class CallModel(BaseModel):
    address: AddressStr
    input: HexStr = "0x"
    logs: Sequence[LogModel] = ()
    state_reverted: bool = False
    index: int = 0

    def to_domain(self) -> Call:
        return Call(
            address=decode_hex(self.address),
            input=decode_hex(self.input),
            logs=tuple(log.to_domain() for log in self.logs),
            state_reverted=self.state_reverted,
            index=self.index,
        )


class TransactionModel(BaseModel):
    hash: WordStr
    index: int = 0
    calls: Sequence[CallModel] = ()

    def to_domain(self) -> TransactionTrace:
        return TransactionTrace(
            hash=decode_hex(self.hash),
            calls=tuple(call.to_domain() for call in self.calls),
            index=self.index,
        )


class BlockModel(BaseModel):
    number: int
    hash: WordStr
    transactions: Sequence[TransactionModel] = ()

    def to_domain(self) -> Block:
        return Block(
            number=self.number,
            hash=decode_hex(self.hash),
            transactions=tuple(tx.to_domain() for tx in self.transactions),
        )


def load_block(path: Path) -> Block:
    """Read and validate a trace document from `path`."""
    return BlockModel.model_validate_json(path.read_text()).to_domain()

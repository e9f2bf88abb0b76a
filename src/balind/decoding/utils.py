"""Decoding utilities: topic parsing and ABI value normalization."""

from __future__ import annotations

import re
from typing import Any

from eth_utils import to_canonical_address

from .specs import TopicFieldSpec

_STRING_TYPE = re.compile(r"\bstring\b")


def parse_topic_field(topic: bytes, spec: TopicFieldSpec) -> Any:
    """Parse one indexed topic according to the declared type."""
    t = spec.type
    if t == "address":
        return topic[-20:]
    if t.startswith("uint"):
        return int.from_bytes(topic, "big", signed=False)
    if t.startswith("int"):
        return int.from_bytes(topic, "big", signed=True)
    if t == "bool":
        return topic[-1] != 0
    # bytes32 and hashed dynamic types (string, arrays): raw 32 bytes
    return topic


def wire_type(abi_type: str) -> str:
    """Type handed to `eth_abi`: `string` is read as `bytes` (same encoding) so bad UTF-8 cannot fail the decode."""
    return _STRING_TYPE.sub("bytes", abi_type)


def normalize_value(abi_type: str, value: Any) -> Any:
    """Normalize an `eth_abi` decoded value: addresses become raw 20 bytes, arrays tuples.

    Strings are decoded lossily; invalid UTF-8 sequences become U+FFFD.
    """
    if abi_type.endswith("]"):
        inner = abi_type[: abi_type.rindex("[")]
        return tuple(normalize_value(inner, v) for v in value)
    if abi_type == "address":
        return to_canonical_address(value)
    if abi_type == "string":
        return value.decode("utf-8", errors="replace")
    return value

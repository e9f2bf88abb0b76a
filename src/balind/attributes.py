"""Attribute value encoders.

Component attributes are raw byte strings. Numbers are stored as minimal
big-endian two's-complement bytes; lists are compact JSON arrays of hex
strings so consumers can parse them without knowing the ABI.
"""

from __future__ import annotations

import json
from collections.abc import Iterable


def to_signed_bytes_be(value: int) -> bytes:
    """Minimal big-endian two's-complement encoding (0 → b"\\x00")."""
    bits = value.bit_length() if value >= 0 else (~value).bit_length()
    return value.to_bytes(bits // 8 + 1, "big", signed=True)


def _compact_json(items: list[str]) -> bytes:
    return json.dumps(items, separators=(",", ":")).encode()


def json_serialize_address_list(addresses: Iterable[bytes]) -> bytes:
    """'["0xab..","0xcd.."]' for a list of raw addresses."""
    return _compact_json(["0x" + a.hex() for a in addresses])


def json_serialize_bigint_list(values: Iterable[int]) -> bytes:
    """'["0x06f05b59d3b20000",...]' using each value's signed big-endian bytes."""
    return _compact_json(["0x" + to_signed_bytes_be(v).hex() for v in values])

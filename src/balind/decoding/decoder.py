"""Generic log and call decoder driven by signature-built layouts.

This module translates trace records into `DecodedEvent` / `DecodedCall` using
an `EventSpec` / `FunctionSpec`. A record that does not have the expected shape
(topic0 or selector mismatch, wrong topic count, undecodable payload) yields
`None`: callers treat that as "not this event", never as an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from eth_abi import decode
from eth_abi.exceptions import DecodingError

from balind.core.models import Call, Log
from balind.decoding.specs import EventSpec, FunctionSpec
from balind.decoding.utils import normalize_value, parse_topic_field, wire_type


@dataclass(slots=True, frozen=True)
class DecodedEvent:
    """Decoded log: `values` holds every parameter by name."""

    name: str
    address: bytes
    values: dict[str, Any]

    def __getitem__(self, key: str) -> Any:
        return self.values[key]


@dataclass(slots=True, frozen=True)
class DecodedCall:
    """Decoded call input: `values` holds every argument by name."""

    name: str
    address: bytes
    values: dict[str, Any]

    def __getitem__(self, key: str) -> Any:
        return self.values[key]


def _abi_decode(types: list[str], payload: bytes) -> tuple[Any, ...] | None:
    """ABI-decode `payload`, returning None when it does not fit `types`."""
    try:
        return decode([wire_type(t) for t in types], payload)
    except (DecodingError, OverflowError):
        return None


def decode_log(log: Log, spec: EventSpec) -> DecodedEvent | None:
    """Decode a log according to `spec` or return None if it is another event."""
    if not log.topics or log.topics[0] != spec.topic0_bytes:
        return None
    if len(log.topics) != len(spec.topic_fields) + 1:
        return None

    values: dict[str, Any] = {}
    for tf in spec.topic_fields:
        values[tf.name] = parse_topic_field(log.topics[tf.index], tf)

    if spec.data_fields:
        decoded = _abi_decode(spec.data_types, log.data)
        if decoded is None:
            return None
        for df in spec.data_fields:
            values[df.name] = normalize_value(df.type, decoded[df.position])

    return DecodedEvent(name=spec.name, address=log.address, values=values)


def decode_call(call: Call, spec: FunctionSpec) -> DecodedCall | None:
    """Decode a call's input according to `spec` or return None if it is another function."""
    if call.input[:4] != spec.selector:
        return None

    decoded = _abi_decode(spec.param_types, call.input[4:])
    if decoded is None:
        return None

    values = {p.name: normalize_value(p.type, v) for p, v in zip(spec.params, decoded)}
    return DecodedCall(name=spec.name, address=call.address, values=values)

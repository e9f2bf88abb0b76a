"""Signature-driven log and call decoding.

This package provides:
- Layout primitives (EventSpec, FunctionSpec and their field specs)
- Builders turning Solidity signatures into layouts
- Generic decoder translating trace records into DecodedEvent / DecodedCall
- Pre-built Balancer v2 layouts (vault events, factory calls)
"""

from balind.decoding.decoder import DecodedCall, DecodedEvent, decode_call, decode_log
from balind.decoding.registry_builder import (
    canonical_signature,
    event_spec_from_signature,
    function_spec_from_signature,
)
from balind.decoding.specs import DataFieldSpec, EventSpec, FunctionSpec, ParamSpec, TopicFieldSpec

__all__ = [
    "DecodedCall",
    "DecodedEvent",
    "decode_call",
    "decode_log",
    "canonical_signature",
    "event_spec_from_signature",
    "function_spec_from_signature",
    "DataFieldSpec",
    "EventSpec",
    "FunctionSpec",
    "ParamSpec",
    "TopicFieldSpec",
]

"""Binary layout primitives for logs and calls.

Defines lightweight dataclasses to describe how to decode a log or a call:
- `TopicFieldSpec`: one indexed parameter, read from a topic
- `DataFieldSpec`: one non-indexed parameter, ABI-decoded from the data section
- `EventSpec`: one event layout (topic0, indexed fields, data fields)
- `ParamSpec` / `FunctionSpec`: one function layout (4-byte selector, arguments)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TopicFieldSpec:
    """Describe one indexed topic field (by 1-based topic index and ABI type)."""

    name: str
    index: int
    type: str  # e.g., "address", "uint256", "bytes32"


@dataclass(frozen=True)
class DataFieldSpec:
    """Describe one non-indexed parameter (0-based position among data params)."""

    name: str
    position: int
    type: str  # e.g., "address[]", "uint8"


@dataclass(frozen=True)
class EventSpec:
    """One event layout."""

    topic0: str  # lowercased 0x-hex
    name: str
    topic_fields: tuple[TopicFieldSpec, ...]
    data_fields: tuple[DataFieldSpec, ...]

    @property
    def topic0_bytes(self) -> bytes:
        return bytes.fromhex(self.topic0[2:])

    @property
    def data_types(self) -> list[str]:
        return [df.type for df in self.data_fields]


@dataclass(frozen=True)
class ParamSpec:
    """One function argument."""

    name: str
    type: str


@dataclass(frozen=True)
class FunctionSpec:
    """One function layout keyed by its 4-byte selector."""

    selector: bytes
    name: str
    params: tuple[ParamSpec, ...]

    @property
    def param_types(self) -> list[str]:
        return [p.type for p in self.params]

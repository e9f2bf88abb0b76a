"""Spec builder utilities for creating layouts from Solidity signatures.

This module provides the core tools for building decoding layouts:
- `event_spec_from_signature()` → EventSpec with topic0 and indexed/data split
- `function_spec_from_signature()` → FunctionSpec with the 4-byte selector
- Signature parsing helpers shared by both
"""

from __future__ import annotations

from eth_utils import keccak

from .specs import DataFieldSpec, EventSpec, FunctionSpec, ParamSpec, TopicFieldSpec


# ---- Helpers: parse a signature ----
def _split_params(params_str: str) -> list[str]:
    """Split the parameter list by commas while respecting nested tuple types.

    Very lightweight splitter sufficient for typical signatures.
    """
    items: list[str] = []
    depth = 0
    buf: list[str] = []
    for ch in params_str:
        if ch == '(':
            depth += 1
            buf.append(ch)
        elif ch == ')':
            depth -= 1
            buf.append(ch)
        elif ch == ',' and depth == 0:
            items.append(''.join(buf).strip())
            buf = []
        else:
            buf.append(ch)
    if buf:
        items.append(''.join(buf).strip())
    # Handle empty list for no params
    return [i for i in items if i]


def _parse_param(p: str, fallback_name: str) -> tuple[str, str, bool]:
    """Parse one parameter fragment into (name, abi_type, indexed)."""
    s = ' '.join(p.strip().split())  # normalize spaces
    indexed = False
    if ' indexed ' in f' {s} ':
        indexed = True
        s = f' {s} '.replace(' indexed ', ' ').strip()
    tokens = s.split()
    if len(tokens) == 1:
        # Unnamed parameter
        return (fallback_name, tokens[0], indexed)
    # Last token is the name, the rest is the type (can include tuple syntax)
    return (tokens[-1], ' '.join(tokens[:-1]), indexed)


def _parse_signature(signature: str) -> tuple[str, list[tuple[str, str, bool]]]:
    """Return (name, [(param_name, abi_type, indexed), ...]) for a signature."""
    sig = signature.strip()
    open_paren = sig.find('(')
    close_paren = sig.rfind(')')
    if open_paren == -1 or close_paren == -1 or close_paren < open_paren:
        raise ValueError(f"Invalid signature: {signature}")
    name = sig[:open_paren].strip()
    params_str = sig[open_paren + 1 : close_paren].strip()
    parsed = [
        _parse_param(part, fallback_name=f"arg{i}")
        for i, part in enumerate(_split_params(params_str))
    ]
    return name, parsed


def canonical_signature(signature: str) -> str:
    """Strip names and `indexed` markers: "f(address a, uint256 b)" → "f(address,uint256)"."""
    name, parsed = _parse_signature(signature)
    return f"{name}({','.join(t for (_, t, _) in parsed)})"


def event_spec_from_signature(signature: str) -> EventSpec:
    """Build an EventSpec from a Solidity event signature string.

    Example input:
      "PoolRegistered(bytes32 indexed poolId, address indexed poolAddress, uint8 specialization)"
    """
    name, parsed = _parse_signature(signature)
    topic0 = '0x' + keccak(text=canonical_signature(signature)).hex()

    indexed_params = [(n, t) for (n, t, is_indexed) in parsed if is_indexed]
    data_params = [(n, t) for (n, t, is_indexed) in parsed if not is_indexed]
    if len(indexed_params) > 3:
        raise ValueError(f"Too many indexed parameters: {signature}")

    return EventSpec(
        topic0=topic0,
        name=name,
        topic_fields=tuple(TopicFieldSpec(n, idx + 1, t) for idx, (n, t) in enumerate(indexed_params)),
        data_fields=tuple(DataFieldSpec(n, idx, t) for idx, (n, t) in enumerate(data_params)),
    )


def function_spec_from_signature(signature: str) -> FunctionSpec:
    """Build a FunctionSpec from a Solidity function signature string.

    Example input:
      "create(string name, string symbol, address[] tokens, uint256[] weights, uint256 swapFeePercentage, address owner)"
    """
    name, parsed = _parse_signature(signature)
    if any(is_indexed for (_, _, is_indexed) in parsed):
        raise ValueError(f"Function parameters cannot be indexed: {signature}")
    return FunctionSpec(
        selector=keccak(text=canonical_signature(signature))[:4],
        name=name,
        params=tuple(ParamSpec(n, t) for (n, t, _) in parsed),
    )

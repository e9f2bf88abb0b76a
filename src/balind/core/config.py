"""Fixed Balancer v2 constants and the dispatcher configuration."""

from __future__ import annotations

from dataclasses import dataclass

# Balancer v2 Vault: central pool and token registry (same address on every chain)
VAULT_ADDRESS = bytes.fromhex("BA12222222228d8Ba445958a75a0704d566BF2C8")

# Protocol family tag attached to every produced component
PROTOCOL_TYPE_NAME = "balancer_v2_pool"


@dataclass(frozen=True)
class DispatcherConfig:
    """Configuration for the factory dispatcher."""

    vault_address: bytes = VAULT_ADDRESS
    protocol_type_name: str = PROTOCOL_TYPE_NAME
    # Reject transactions holding more than one matching vault registration.
    # When False the first match wins (and a warning is logged).
    strict_correlation: bool = True


DEFAULT_CONFIG = DispatcherConfig()

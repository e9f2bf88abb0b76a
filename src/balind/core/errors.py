"""Error taxonomy.

Unrecognized input is never an error (the dispatcher returns None); these
exceptions mark transactions whose correlated Vault signals are missing or
ambiguous.
"""

from __future__ import annotations


class BalindError(Exception):
    """Base class for errors raised by balind."""


class InconsistentTransactionError(BalindError):
    """A pool creation was decoded but its vault counterpart is missing from the transaction."""

    def __init__(self, message: str, *, tx_hash: bytes, subject: bytes) -> None:
        super().__init__(f"{message} (tx=0x{tx_hash.hex()}, subject=0x{subject.hex()})")
        self.tx_hash = tx_hash
        self.subject = subject  # pool address or pool id that failed to correlate


class AmbiguousCorrelationError(InconsistentTransactionError):
    """More than one vault log matches the same pool within one transaction."""

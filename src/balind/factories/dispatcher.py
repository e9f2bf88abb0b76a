"""Factory dispatcher: turn a pool factory `create` into a `ProtocolComponent`.

The factory address selects a binding from the schema table. The binding's
layouts decode the `create` call and the `PoolCreated` log; the Vault logs of
the same transaction then supply the pool id and, for factories whose call
tokens are not final, the registered token list.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from balind.core.config import DEFAULT_CONFIG, DispatcherConfig
from balind.core.errors import AmbiguousCorrelationError, InconsistentTransactionError
from balind.core.models import (
    Attribute,
    Call,
    FinancialType,
    ImplementationType,
    Log,
    ProtocolComponent,
    ProtocolType,
    TransactionTrace,
    to_hex,
)
from balind.decoding import abis
from balind.decoding.decoder import DecodedEvent, decode_call, decode_log
from balind.factories.schemas import UNSUPPORTED_FACTORIES, get_binding

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _find_vault_event(
    tx: TransactionTrace,
    config: DispatcherConfig,
    decode: Callable[[Log], T | None],
    predicate: Callable[[T], bool],
    *,
    what: str,
    subject: bytes,
) -> T:
    """Scan the transaction's Vault logs for exactly one decoded event matching `predicate`."""
    matches = [
        ev
        for log, _call in tx.logs_with_calls()
        if log.address == config.vault_address
        and (ev := decode(log)) is not None
        and predicate(ev)
    ]
    if not matches:
        raise InconsistentTransactionError(f"no {what} found in transaction", tx_hash=tx.hash, subject=subject)
    if len(matches) > 1:
        if config.strict_correlation:
            raise AmbiguousCorrelationError(
                f"{len(matches)} {what} events match", tx_hash=tx.hash, subject=subject
            )
        logger.warning(
            "%d %s events match %s in tx %s, using the first",
            len(matches), what, to_hex(subject), to_hex(tx.hash),
        )
    return matches[0]


def get_pool_registered(
    tx: TransactionTrace,
    pool_address: bytes,
    config: DispatcherConfig = DEFAULT_CONFIG,
) -> DecodedEvent:
    """Return the Vault `PoolRegistered` event for `pool_address` within `tx`."""
    return _find_vault_event(
        tx,
        config,
        lambda log: decode_log(log, abis.POOL_REGISTERED),
        lambda ev: ev["poolAddress"] == pool_address,
        what="PoolRegistered",
        subject=pool_address,
    )


def get_tokens_registered(
    tx: TransactionTrace,
    pool_id: bytes,
    config: DispatcherConfig = DEFAULT_CONFIG,
) -> DecodedEvent:
    """Return the Vault `TokensRegistered` event for `pool_id` within `tx`."""
    return _find_vault_event(
        tx,
        config,
        lambda log: decode_log(log, abis.TOKENS_REGISTERED),
        lambda ev: ev["poolId"] == pool_id,
        what="TokensRegistered",
        subject=pool_id,
    )


def address_map(
    pool_factory_address: bytes,
    log: Log,
    call: Call,
    tx: TransactionTrace,
    *,
    config: DispatcherConfig = DEFAULT_CONFIG,
) -> ProtocolComponent | None:
    """Build the component for a pool created by a known factory, or return None.

    Returns None when the factory is not in the schema table or when `call` /
    `log` are not the factory's `create` call / `PoolCreated` log.

    Raises
    ------
    InconsistentTransactionError
        The pool was created but the transaction lacks its Vault registration
        (or its token registration, for factories whose call tokens are not final).
    """
    binding = get_binding(pool_factory_address)
    if binding is None:
        unsupported = UNSUPPORTED_FACTORIES.get(bytes(pool_factory_address))
        if unsupported is not None:
            logger.debug("skipping %s at %s: %s", unsupported.name, to_hex(unsupported.address), unsupported.reason)
        return None

    create_call = decode_call(call, binding.create_call)
    if create_call is None:
        return None
    pool_created = decode_log(log, binding.pool_created)
    if pool_created is None:
        return None

    pool: bytes = pool_created["pool"]
    pool_registered = get_pool_registered(tx, pool, config)
    pool_id: bytes = pool_registered["poolId"]

    if binding.call_tokens_authoritative:
        tokens = tuple(create_call["tokens"])
    else:
        tokens = tuple(get_tokens_registered(tx, pool_id, config)["tokens"])

    attributes = [("pool_type", binding.pool_type), *binding.build_attributes(create_call, pool_created)]

    component = ProtocolComponent(
        id=to_hex(pool_id),
        tokens=tokens,
        contracts=(pool, config.vault_address),
        static_att=tuple(Attribute(name, value) for name, value in attributes),
        protocol_type=ProtocolType(
            name=config.protocol_type_name,
            financial_type=FinancialType.SWAP,
            implementation_type=ImplementationType.VM,
        ),
    )
    logger.info(
        "%s created pool %s (id=%s, %d tokens) in tx %s",
        binding.schema.value, to_hex(pool), component.id, len(tokens), to_hex(tx.hash),
    )
    return component

"""Helpers building ABI-encoded calls, logs and traces for the tests."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from eth_abi import encode

from balind.core.config import VAULT_ADDRESS
from balind.core.models import Block, Call, Log, TransactionTrace
from balind.decoding import abis
from balind.factories.schemas import FactoryBinding, FactorySchema

FEE = 3 * 10**15  # 0.3%
HALF = 5 * 10**17


def addr(n: int) -> bytes:
    return bytes([n]) * 20


def pool_id_for(pool: bytes, nonce: int = 1) -> bytes:
    # Vault pool ids are the pool address, the specialization and a nonce
    return pool + b"\x00\x02" + nonce.to_bytes(10, "big")


def word(value: bytes) -> bytes:
    return value.rjust(32, b"\x00")


def _abi_value(abi_type: str, value: Any) -> Any:
    if abi_type.endswith("]"):
        inner = abi_type[: abi_type.rindex("[")]
        return [_abi_value(inner, v) for v in value]
    if abi_type == "address":
        return "0x" + value.hex()
    return value


def default_args(schema: FactorySchema, tokens: list[bytes]) -> dict[str, Any]:
    """Plausible `create` arguments for `schema`."""
    common = {"name": "Balancer Pool", "symbol": "BPT", "swapFeePercentage": FEE, "owner": addr(0xEE)}
    match schema:
        case FactorySchema.WEIGHTED_POOL_FACTORY_V1:
            return {**common, "tokens": tokens, "weights": [HALF] * len(tokens)}
        case FactorySchema.WEIGHTED_POOL_FACTORY_V2 | FactorySchema.WEIGHTED_POOL_FACTORY_V3:
            return {
                **common,
                "tokens": tokens,
                "normalizedWeights": [HALF] * len(tokens),
                "rateProviders": [addr(0)] * len(tokens),
            }
        case FactorySchema.WEIGHTED_POOL_FACTORY_V4:
            return {
                **common,
                "tokens": tokens,
                "normalizedWeights": [HALF] * len(tokens),
                "rateProviders": [addr(0)] * len(tokens),
                "salt": b"\x42" * 32,
            }
        case FactorySchema.WEIGHTED_POOL_2_TOKENS_FACTORY:
            return {**common, "tokens": tokens, "weights": [8 * 10**17, 2 * 10**17], "oracleEnabled": True}
        case FactorySchema.COMPOSABLE_STABLE_POOL_FACTORY:
            return {
                **common,
                "tokens": tokens,
                "amplificationParameter": 200,
                "rateProviders": [addr(0xA0 + i) for i in range(len(tokens))],
                "tokenRateCacheDurations": [10800] * len(tokens),
                "exemptFromYieldProtocolFeeFlag": False,
                "salt": b"\x07" * 32,
            }
        case FactorySchema.ERC4626_LINEAR_POOL_FACTORY:
            return {
                **common,
                "mainToken": tokens[0],
                "wrappedToken": tokens[1],
                "upperTarget": 2_000_000 * 10**18,
                "protocolId": 0,
                "salt": b"\x09" * 32,
            }
        case FactorySchema.YEARN_LINEAR_POOL_FACTORY:
            return {
                **common,
                "mainToken": tokens[0],
                "wrappedToken": tokens[1],
                "upperTarget": 2_000_000 * 10**18,
                "protocolId": 3,
            }
    raise AssertionError(schema)


def encode_create(binding: FactoryBinding, args: dict[str, Any]) -> bytes:
    spec = binding.create_call
    values = [_abi_value(p.type, args[p.name]) for p in spec.params]
    return spec.selector + encode(spec.param_types, values)


def pool_created_log(factory: bytes, pool: bytes) -> Log:
    return Log(address=factory, topics=(abis.POOL_CREATED.topic0_bytes, word(pool)), data=b"")


def pool_registered_log(pool_id: bytes, pool: bytes, *, emitter: bytes = VAULT_ADDRESS) -> Log:
    return Log(
        address=emitter,
        topics=(abis.POOL_REGISTERED.topic0_bytes, pool_id, word(pool)),
        data=encode(["uint8"], [2]),
    )


def tokens_registered_log(pool_id: bytes, tokens: list[bytes]) -> Log:
    return Log(
        address=VAULT_ADDRESS,
        topics=(abis.TOKENS_REGISTERED.topic0_bytes, pool_id),
        data=encode(
            ["address[]", "address[]"],
            [_abi_value("address[]", tokens), _abi_value("address[]", [addr(0)] * len(tokens))],
        ),
    )


def creation_tx(
    binding: FactoryBinding,
    *,
    pool: bytes,
    call_tokens: list[bytes],
    registered_tokens: list[bytes] | None = None,
    register_pool: bool = True,
    args: dict[str, Any] | None = None,
    extra_vault_logs: tuple[Log, ...] = (),
    tx_hash: bytes = b"\x11" * 32,
    reverted: bool = False,
) -> TransactionTrace:
    """A transaction where `binding`'s factory creates `pool` and the Vault registers it."""
    pool_id = pool_id_for(pool)
    factory_call = Call(
        address=binding.address,
        input=encode_create(binding, args or default_args(binding.schema, call_tokens)),
        logs=(pool_created_log(binding.address, pool),),
        state_reverted=reverted,
    )
    vault_logs: list[Log] = []
    if register_pool:
        vault_logs.append(pool_registered_log(pool_id, pool))
    if registered_tokens is not None:
        vault_logs.append(tokens_registered_log(pool_id, registered_tokens))
    vault_logs.extend(extra_vault_logs)
    # the factory emits PoolCreated first (log index 0); Vault logs follow
    vault_logs = [replace(log, index=i + 1) for i, log in enumerate(vault_logs)]
    vault_call = Call(address=VAULT_ADDRESS, input=b"\x09\xb2\x76\x0f", logs=tuple(vault_logs), index=1)
    return TransactionTrace(hash=tx_hash, calls=(factory_call, vault_call))


def _hex(value: bytes) -> str:
    return "0x" + value.hex()


def block_to_json(block: Block) -> dict[str, Any]:
    """Render a block as the trace document accepted by `balind.adapters.traces`."""
    return {
        "number": block.number,
        "hash": _hex(block.hash),
        "transactions": [
            {
                "hash": _hex(tx.hash),
                "index": tx.index,
                "calls": [
                    {
                        "address": _hex(call.address),
                        "input": _hex(call.input),
                        "state_reverted": call.state_reverted,
                        "index": call.index,
                        "logs": [
                            {
                                "address": _hex(log.address),
                                "topics": [_hex(t) for t in log.topics],
                                "data": _hex(log.data),
                                "index": log.index,
                            }
                            for log in call.logs
                        ],
                    }
                    for call in tx.calls
                ],
            }
            for tx in block.transactions
        ],
    }

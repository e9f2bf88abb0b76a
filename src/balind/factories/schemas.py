"""Schema table: supported Balancer v2 pool factories and how to read them.

Each `FactorySchema` member is bound to exactly one `FactoryBinding` holding
the factory address, the `create` call layout, the `PoolCreated` log layout,
whether the call's token list is final, and the attribute derivation.

The table is append-only: support for a new factory means a new enum member
and a new entry in `FACTORY_TABLE`. Factories that are known but deliberately
not handled are listed in `UNSUPPORTED_FACTORIES` together with the reason.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from balind.attributes import json_serialize_address_list, json_serialize_bigint_list, to_signed_bytes_be
from balind.decoding import abis
from balind.decoding.decoder import DecodedCall, DecodedEvent
from balind.decoding.specs import EventSpec, FunctionSpec


class FactorySchema(str, Enum):
    """Supported factory versions; the value is the `pool_type` attribute."""

    WEIGHTED_POOL_FACTORY_V1 = "WeightedPoolFactoryV1"
    WEIGHTED_POOL_FACTORY_V2 = "WeightedPoolFactoryV2"
    WEIGHTED_POOL_FACTORY_V3 = "WeightedPoolFactoryV3"
    WEIGHTED_POOL_FACTORY_V4 = "WeightedPoolFactoryV4"
    COMPOSABLE_STABLE_POOL_FACTORY = "ComposableStablePoolFactory"
    ERC4626_LINEAR_POOL_FACTORY = "ERC4626LinearPoolFactory"
    YEARN_LINEAR_POOL_FACTORY = "YearnLinearPoolFactory"
    WEIGHTED_POOL_2_TOKENS_FACTORY = "WeightedPool2TokensFactory"


# (name, raw value) pairs, in output order
AttributeList = list[tuple[str, bytes]]
AttributeBuilder = Callable[[DecodedCall, DecodedEvent], AttributeList]

MANUAL_UPDATES = ("manual_updates", b"\x01")


@dataclass(frozen=True)
class FactoryBinding:
    """Everything the dispatcher needs to know about one factory."""

    schema: FactorySchema
    address: bytes
    create_call: FunctionSpec
    pool_created: EventSpec
    # False when the vault assigns a different token set (e.g. the pool's own BPT)
    call_tokens_authoritative: bool
    build_attributes: AttributeBuilder

    @property
    def pool_type(self) -> bytes:
        return self.schema.value.encode()


@dataclass(frozen=True)
class UnsupportedFactory:
    name: str
    address: bytes
    reason: str


# ---- attribute builders ----


def _weighted_v1_attributes(create: DecodedCall, _created: DecodedEvent) -> AttributeList:
    return [
        ("normalized_weights", json_serialize_bigint_list(create["weights"])),
        ("fee", to_signed_bytes_be(create["swapFeePercentage"])),
        MANUAL_UPDATES,
    ]


def _weighted_attributes(create: DecodedCall, _created: DecodedEvent) -> AttributeList:
    return [
        ("normalized_weights", json_serialize_bigint_list(create["normalizedWeights"])),
        ("rate_providers", json_serialize_address_list(create["rateProviders"])),
        ("fee", to_signed_bytes_be(create["swapFeePercentage"])),
        MANUAL_UPDATES,
    ]


def _weighted_2_tokens_attributes(create: DecodedCall, _created: DecodedEvent) -> AttributeList:
    return [
        ("weights", json_serialize_bigint_list(create["weights"])),
        ("fee", to_signed_bytes_be(create["swapFeePercentage"])),
        MANUAL_UPDATES,
    ]


def _composable_stable_attributes(create: DecodedCall, created: DecodedEvent) -> AttributeList:
    return [
        ("bpt", created["pool"]),
        ("fee", to_signed_bytes_be(create["swapFeePercentage"])),
        ("rate_providers", json_serialize_address_list(create["rateProviders"])),
        MANUAL_UPDATES,
    ]


def _linear_attributes(create: DecodedCall, created: DecodedEvent) -> AttributeList:
    return [
        ("upper_target", to_signed_bytes_be(create["upperTarget"])),
        MANUAL_UPDATES,
        ("bpt", created["pool"]),
        ("main_token", create["mainToken"]),
        ("wrapped_token", create["wrappedToken"]),
        ("fee", to_signed_bytes_be(create["swapFeePercentage"])),
    ]


# ---- table ----


def _binding(
    schema: FactorySchema,
    address: str,
    create_call: FunctionSpec,
    build_attributes: AttributeBuilder,
    *,
    call_tokens_authoritative: bool,
) -> FactoryBinding:
    return FactoryBinding(
        schema=schema,
        address=bytes.fromhex(address),
        create_call=create_call,
        pool_created=abis.POOL_CREATED,
        call_tokens_authoritative=call_tokens_authoritative,
        build_attributes=build_attributes,
    )


_BINDINGS: Sequence[FactoryBinding] = (
    _binding(
        FactorySchema.WEIGHTED_POOL_FACTORY_V1,
        "7dFdEF5f355096603419239CE743BfaF1120312B",
        abis.WEIGHTED_POOL_FACTORY_V1_CREATE,
        _weighted_v1_attributes,
        call_tokens_authoritative=True,
    ),
    _binding(
        FactorySchema.WEIGHTED_POOL_FACTORY_V2,
        "8df6EfEc5547e31B0eb7d1291B511FF8a2bf987c",
        abis.WEIGHTED_POOL_FACTORY_V2_CREATE,
        _weighted_attributes,
        call_tokens_authoritative=True,
    ),
    _binding(
        FactorySchema.WEIGHTED_POOL_FACTORY_V3,
        "f1665E19bc105BE4EDD3739F88315cC699cc5b65",
        abis.WEIGHTED_POOL_FACTORY_V3_CREATE,
        _weighted_attributes,
        call_tokens_authoritative=True,
    ),
    _binding(
        FactorySchema.WEIGHTED_POOL_FACTORY_V4,
        "c7E5ED1054A24Ef31D827E6F86caA58B3Bc168d7",
        abis.WEIGHTED_POOL_FACTORY_V4_CREATE,
        _weighted_attributes,
        call_tokens_authoritative=True,
    ),
    _binding(
        FactorySchema.COMPOSABLE_STABLE_POOL_FACTORY,
        "A8920455934Da4D853faac1f94Fe7bEf72943eF1",
        abis.COMPOSABLE_STABLE_POOL_FACTORY_CREATE,
        _composable_stable_attributes,
        call_tokens_authoritative=False,
    ),
    _binding(
        FactorySchema.ERC4626_LINEAR_POOL_FACTORY,
        "7ADbdabaA80F654568421887c12F09E0C7BD9629",
        abis.ERC4626_LINEAR_POOL_FACTORY_CREATE,
        _linear_attributes,
        call_tokens_authoritative=False,
    ),
    _binding(
        FactorySchema.YEARN_LINEAR_POOL_FACTORY,
        "19DFEF0a828EEC0c85FbB335aa65437417390b85",
        abis.YEARN_LINEAR_POOL_FACTORY_CREATE,
        _linear_attributes,
        call_tokens_authoritative=False,
    ),
    # Deprecated, kept to track the 80BAL-20WETH pool
    _binding(
        FactorySchema.WEIGHTED_POOL_2_TOKENS_FACTORY,
        "CF0a32Bbef8F064969F21f7e02328FB577382018",
        abis.WEIGHTED_POOL_2_TOKENS_FACTORY_CREATE,
        _weighted_2_tokens_attributes,
        call_tokens_authoritative=True,
    ),
)

FACTORY_TABLE: dict[bytes, FactoryBinding] = {b.address: b for b in _BINDINGS}

UNSUPPORTED_FACTORIES: dict[bytes, UnsupportedFactory] = {
    u.address: u
    for u in (
        UnsupportedFactory(
            name="GearboxLinearPoolFactory",
            address=bytes.fromhex("39A79EB449Fc05C92c39aA6f0e9BfaC03BE8dE5B"),
            reason="factory is disabled on chain",
        ),
        UnsupportedFactory(
            name="ManagedPoolFactory",
            address=bytes.fromhex("BF904F9F340745B4f0c4702c7B6Ab1e808eA6b93"),
            reason="create() takes nested settings structs unlike every other factory",
        ),
    )
}


def get_binding(factory_address: bytes) -> FactoryBinding | None:
    """Return the binding for a factory address, or None if it is not supported."""
    return FACTORY_TABLE.get(bytes(factory_address))


def get_binding_by_schema(schema: FactorySchema) -> FactoryBinding:
    for binding in _BINDINGS:
        if binding.schema is schema:
            return binding
    raise KeyError(schema)

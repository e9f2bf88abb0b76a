"""Balancer v2 layouts: Vault registration events and pool factory `create` calls.

Every layout is built from its Solidity signature via the registry_builder
module; topic0 and selectors are derived, never hard-coded.

Available layouts:
- Vault: POOL_REGISTERED, TOKENS_REGISTERED
- Factories: POOL_CREATED (shared event) and one `create` function per factory

Example
-------
>>> from balind.decoding.abis import POOL_REGISTERED
>>> POOL_REGISTERED.name
'PoolRegistered'
"""

from __future__ import annotations

from .registry_builder import event_spec_from_signature, function_spec_from_signature


# -------------------------
# Vault events
# -------------------------

POOL_REGISTERED = event_spec_from_signature(
    "PoolRegistered(bytes32 indexed poolId, address indexed poolAddress, uint8 specialization)"
)

TOKENS_REGISTERED = event_spec_from_signature(
    "TokensRegistered(bytes32 indexed poolId, address[] tokens, address[] assetManagers)"
)


# -------------------------
# Factory event (same layout for every factory generation)
# -------------------------

POOL_CREATED = event_spec_from_signature("PoolCreated(address indexed pool)")


# -------------------------
# Weighted pool factories
# -------------------------

WEIGHTED_POOL_FACTORY_V1_CREATE = function_spec_from_signature(
    "create(string name, string symbol, address[] tokens, uint256[] weights, "
    "uint256 swapFeePercentage, address owner)"
)

WEIGHTED_POOL_FACTORY_V2_CREATE = function_spec_from_signature(
    "create(string name, string symbol, address[] tokens, uint256[] normalizedWeights, "
    "address[] rateProviders, uint256 swapFeePercentage, address owner)"
)

# v3 kept the v2 argument list; only the deployed pool code changed
WEIGHTED_POOL_FACTORY_V3_CREATE = WEIGHTED_POOL_FACTORY_V2_CREATE

WEIGHTED_POOL_FACTORY_V4_CREATE = function_spec_from_signature(
    "create(string name, string symbol, address[] tokens, uint256[] normalizedWeights, "
    "address[] rateProviders, uint256 swapFeePercentage, address owner, bytes32 salt)"
)

WEIGHTED_POOL_2_TOKENS_FACTORY_CREATE = function_spec_from_signature(
    "create(string name, string symbol, address[] tokens, uint256[] weights, "
    "uint256 swapFeePercentage, bool oracleEnabled, address owner)"
)


# -------------------------
# Composable stable pool factory
# -------------------------

COMPOSABLE_STABLE_POOL_FACTORY_CREATE = function_spec_from_signature(
    "create(string name, string symbol, address[] tokens, uint256 amplificationParameter, "
    "address[] rateProviders, uint256[] tokenRateCacheDurations, bool exemptFromYieldProtocolFeeFlag, "
    "uint256 swapFeePercentage, address owner, bytes32 salt)"
)


# -------------------------
# Linear pool factories
# -------------------------

ERC4626_LINEAR_POOL_FACTORY_CREATE = function_spec_from_signature(
    "create(string name, string symbol, address mainToken, address wrappedToken, uint256 upperTarget, "
    "uint256 swapFeePercentage, address owner, uint256 protocolId, bytes32 salt)"
)

YEARN_LINEAR_POOL_FACTORY_CREATE = function_spec_from_signature(
    "create(string name, string symbol, address mainToken, address wrappedToken, uint256 upperTarget, "
    "uint256 swapFeePercentage, address owner, uint256 protocolId)"
)

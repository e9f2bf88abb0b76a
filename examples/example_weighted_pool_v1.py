from eth_abi import encode

from balind import VAULT_ADDRESS, address_map
from balind.core.models import Call, Log, TransactionTrace
from balind.decoding import abis
from balind.factories.schemas import FactorySchema, get_binding_by_schema

binding = get_binding_by_schema(FactorySchema.WEIGHTED_POOL_FACTORY_V1)

POOL = bytes.fromhex("5c6ee304399dbdb9c8ef030ab642b10820db8f56")  # 80BAL-20WETH style address
WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
BAL = "0xba100000625a3754423978a60c9317c58a424e3d"
POOL_ID = POOL + bytes.fromhex("0002") + (1).to_bytes(10, "big")

create_input = binding.create_call.selector + encode(
    binding.create_call.param_types,
    ["Balancer 80 BAL 20 WETH", "B-80BAL-20WETH", [BAL, WETH], [8 * 10**17, 2 * 10**17], 10**16, "0x" + "00" * 20],
)

factory_call = Call(
    address=binding.address,
    input=create_input,
    logs=(Log(address=binding.address, topics=(abis.POOL_CREATED.topic0_bytes, POOL.rjust(32, b"\x00")), data=b""),),
)
vault_call = Call(
    address=VAULT_ADDRESS,
    input=b"",
    logs=(
        Log(
            address=VAULT_ADDRESS,
            topics=(abis.POOL_REGISTERED.topic0_bytes, POOL_ID, POOL.rjust(32, b"\x00")),
            data=encode(["uint8"], [2]),
        ),
    ),
)
tx = TransactionTrace(hash=b"\x00" * 32, calls=(factory_call, vault_call))

component = address_map(binding.address, factory_call.logs[0], factory_call, tx)
assert component is not None
print(component.to_json_line())

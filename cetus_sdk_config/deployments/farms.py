from ..config import Env, FarmsSdkOptions, Package
from ..constants import FULL_RPC_URL_MAINNET, FULL_RPC_URL_TESTNET, GRAPH_RPC_URL_MAINNET


farms_mainnet = FarmsSdkOptions(
    env=Env.MAINNET,
    full_rpc_url=FULL_RPC_URL_MAINNET,
    graph_rpc_url=GRAPH_RPC_URL_MAINNET,
    # https://www.moveregistry.com/package/@cetuspackages/farming?tab=versions
    farms=Package(
        package_id="0x11ea791d82b5742cc8cab0bf7946035c97d9001d7c3803a93f119753da66f526",
        published_at="0x1829f473437d24456825662e5bba97924194b5008dcbb59f6b6a6eb2a5d1a2de",
        version=9,
        config={
            "global_config_id": "0x21215f2f6de04b57dd87d9be7bb4e15499aec935e36078e2488f36436d64996e",
            "rewarder_manager_id": "0xe0e155a88c77025056da08db5b1701a91b79edb6167462f768e387c3ed6614d5",
            "rewarder_manager_handle": "0xb32e312cbb3367d6f3d2b4e57c9225e903d29b7b9f612dae2ddf75bdeb26a5aa",
            "admin_cap_id": "0xf10fbf1fea5b7aeaa524b87769461a28c5c977613046360093673991f26d886c",
        },
    ),
)

farms_testnet = FarmsSdkOptions(
    env=Env.TESTNET,
    full_rpc_url=FULL_RPC_URL_TESTNET,
    farms=Package(
        package_id="0x5f64435f1496e51e0b7b3d686cafdff0cbfa2cded7f3e4c579deb5d0a0338123",
        published_at="0x5f64435f1496e51e0b7b3d686cafdff0cbfa2cded7f3e4c579deb5d0a0338123",
        version=1,
        config={
            "global_config_id": "0x92aa3ffab80fe7ed518442413aa26d91d13c5e95aca6c3d9c03bdc7663119fd5",
            "rewarder_manager_id": "0x8b356e02ffbcab52abba7e6ef0a4b822779cccb695d42fc15d3cb8eb3ed1b624",
            "rewarder_manager_handle": "0x710ef7560cb9bfaa69024356297324ef1558b1a81a1a3ae4840915d3a203e7b7",
            "admin_cap_id": "0x69a2261cd2bb4bad1c23dd0ff13b9e891c95393b76813658d463af75fae62735",
        },
    ),
)

from ..config import DlmmSdkOptions, Env, Package
from ..constants import FULL_RPC_URL_MAINNET, FULL_RPC_URL_TESTNET, GRAPH_RPC_URL_MAINNET, GRAPH_RPC_URL_TESTNET


dlmm_mainnet = DlmmSdkOptions(
    env=Env.MAINNET,
    full_rpc_url=FULL_RPC_URL_MAINNET,
    graph_rpc_url=GRAPH_RPC_URL_MAINNET,
    dlmm_pool=Package(
        package_id="0x5664f9d3fd82c84023870cfbda8ea84e14c8dd56ce557ad2116e0668581a682b",
        published_at="0xa4c6f46bd6b456e6477bcddf0652e0d2d8fb4767e306533e6e885302ee28cfab",
        version=4,
        config={
            "registry_id": "0xb1d55e7d895823c65f98d99b81a69436cf7d1638629c9ccb921326039cda1f1b",
            "pools_id": "0xc3683b2356cac6423e9ecaea20955c7cc193998b016e5b884730ed1192174991",
            "global_config_id": "0xf31b605d117f959b9730e8c07b08b856cb05143c5e81d5751c90d2979e82f599",
            "versioned_id": "0x05370b2d656612dd5759cbe80463de301e3b94a921dfc72dd9daa2ecdeb2d0a8",
            "admin_cap_id": "0xc4c42bc31cb54beb679dccd547f8bdb970cb6dc989bd1f85a4fed4812ed95d6e",
            "partners_id": "0x5c0affc8d363b6abb1f32790c229165215f4edead89a9bc7cd95dad717b4296a",
        },
    ),
    dlmm_router=Package(
        package_id="0x8d389fa25cb08ebc5e520bc520ed394eed9e62b56b7868acb398bf298b8a76f3",
        published_at="0x8b34660be96911d07088c754a8b759f0c59626936a002789b389f82ec801d3b8",
        version=2,
    ),
)

dlmm_testnet = DlmmSdkOptions(
    env=Env.TESTNET,
    full_rpc_url=FULL_RPC_URL_TESTNET,
    graph_rpc_url=GRAPH_RPC_URL_TESTNET,
    dlmm_pool=Package(
        package_id="0x17a1f5a8779461ff44e942adf33325cce112c693d6a177ed77f035ca86d1fdb6",
        published_at="0x6d32c1be32eefcea933c03dd5cb7c783d1d83f6b30c4d1131d955933747b1701",
        version=1,
        config={
            "registry_id": "0x319070e26a6809f439d3c4a45e63bf74939c5fe3165de7b65968ee8547f71bd0",
            "pools_id": "0x505fcde74ab557d553832a87f169a0408ad3507ca4e84b25f7d32c2c1535765c",
            "global_config_id": "0x88bb33e9eff2fccab980a0e4b43fc4572abd08f08304d47a20d3e4e99d94d159",
            "versioned_id": "0xa710caae87b2129acc97fbb98ea7011e3137c3291b02c0fcce866d67d5d9e8d0",
            "admin_cap_id": "0x6fc908894ad7c2ff16cca07a05af6760831a8b5e5dc34e40470dce6ee1760155",
            "partners_id": "0xc5c31fe1550e39c9890e0fe3d2608dd9b408a10d74020e5ff72ccfffe4c9c879",
        },
    ),
    dlmm_router=Package(
        package_id="0xba3059875c8980ac171fc2bac81b9df172fb77fa0cb5a267636df701225b93ef",
        published_at="0x59b7a2da6db8f9245a1db6169018af7124c0714fa77a84224967ead6be125127",
        version=1,
    ),
    # Test coin faucet, testnet only
    faucet=Package(
        package_id="0x14a71d857b34677a7d57e0feb303df1adb515a37780645ab763d42ce8d1a5e48",
        published_at="0x14a71d857b34677a7d57e0feb303df1adb515a37780645ab763d42ce8d1a5e48",
        version=1,
    ),
)

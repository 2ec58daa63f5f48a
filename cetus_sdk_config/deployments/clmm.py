from ..config import ClmmSdkOptions, Env, Package
from ..constants import FULL_RPC_URL_TESTNET, GRAPH_RPC_URL_TESTNET, STATS_POOLS_URL_TESTNET


clmm_testnet = ClmmSdkOptions(
    env=Env.TESTNET,
    full_rpc_url=FULL_RPC_URL_TESTNET,
    graph_rpc_url=GRAPH_RPC_URL_TESTNET,
    cetus_config=Package(
        package_id="0x2933975c3f74ef7c31f512edead6c6ce3f58f8e8fdbea78770ec8d5abd8ff700",
        published_at="0xb50a626294f743b40ea51c9cb75190f0e38c71f580981b5613aef910b67a2691",
        config={
            "coin_list_id": "",
            "launchpad_pools_id": "",
            "clmm_pools_id": "",
            "admin_cap_id": "0x774656a83f4f625fcc4e4dbf103eb77caf2d8b8f114ad33f55b848be068267b9",
            "global_config_id": "0x95275a022123c66682278e9df6b5bac4da9abcc29ab698b7b2a6213262a592fe",
            "coin_list_handle": "",
            "launchpad_pools_handle": "",
            "clmm_pools_handle": "",
        },
    ),
    clmm_pool=Package(
        package_id="0x5372d555ac734e272659136c2a0cd3227f9b92de67c80dc11250307268af2db8",
        published_at="0x5372d555ac734e272659136c2a0cd3227f9b92de67c80dc11250307268af2db8",
        config={
            "pools_id": "0x20a086e6fa0741b3ca77d033a65faf0871349b986ddbdde6fa1d85d78a5f4222",
            "global_config_id": "0xc6273f844b4bc258952c4e477697aa12c918c8e08106fac6b934811298c9820a",
            "global_vault_id": "0x71e74a999dd7959e483f758ddf573e85fa4c24944db33ff6763c9d85a9c045fe",
            "admin_cap_id": "0xbf4c48590f403c38351de0e8aa13d6d91bf78fd8c04e93ac1d0269c44d70ae02",
            "partners_id": "0xb5ae5ed3f403654ae1307aadc0140f746db41efb7bda92235257c84d90a1397e",
        },
    ),
    integrate=Package(
        package_id="0x36187418dd79415d50e2e5903f9b3caca582052005f062959c86da64e82107a9",
        published_at="0x36187418dd79415d50e2e5903f9b3caca582052005f062959c86da64e82107a9",
        version=1,
    ),
    stats_pools_url=STATS_POOLS_URL_TESTNET,
    clmm_vest=Package(
        package_id="0xa46d9c66e7b24ab14c5fc5f0d08fa257d833718f0295a6343556ea2f2fdfbd7f",
        published_at="0xa46d9c66e7b24ab14c5fc5f0d08fa257d833718f0295a6343556ea2f2fdfbd7f",
        config={
            "clmm_vest_id": "0x308b24963e5992f699e32db2f7088b812566a0cae580317fd3b8bf61de7f5508",
            "versioned_id": "0x1cfb684d8ff581416a56caba2aa419bee45fe98a23cbf28e2c6c1021b14cab7c",
            "cetus_coin_type": "0xc6c51938da9a5cf6d6dca692783ea7bdf4478f7b1fef693f58947848f84bcf89::cetus::CETUS",
        },
    ),
)

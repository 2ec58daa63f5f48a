from ..config import Env, ZapSdkOptions
from ..constants import (
    AGGREGATOR_URL_MAINNET,
    AGGREGATOR_URL_TESTNET,
    DEFAULT_PROVIDERS,
    FULL_RPC_URL_MAINNET,
    FULL_RPC_URL_TESTNET,
    GRAPH_RPC_URL_MAINNET,
    GRAPH_RPC_URL_TESTNET,
)


zap_mainnet = ZapSdkOptions(
    env=Env.MAINNET,
    full_rpc_url=FULL_RPC_URL_MAINNET,
    graph_rpc_url=GRAPH_RPC_URL_MAINNET,
    aggregator_url=AGGREGATOR_URL_MAINNET,
    providers=DEFAULT_PROVIDERS,
)

zap_testnet = ZapSdkOptions(
    env=Env.TESTNET,
    full_rpc_url=FULL_RPC_URL_TESTNET,
    graph_rpc_url=GRAPH_RPC_URL_TESTNET,
    aggregator_url=AGGREGATOR_URL_TESTNET,
    providers=["CETUS", "DEEPBOOK", "KRIYA", "KRIYAV3", "FLOWX", "FLOWXV3", "AFTERMATH", "TURBOS", "HAEDAL", "VOLO", "AFSUI"],
)

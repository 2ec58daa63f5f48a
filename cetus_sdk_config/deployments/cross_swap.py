from ..config import CrossSwapSdkOptions, Env, LifiConfig, MayanConfig
from ..constants import FULL_RPC_URL_MAINNET


cross_swap_mainnet = CrossSwapSdkOptions(
    env=Env.MAINNET,
    full_rpc_url=FULL_RPC_URL_MAINNET,
    mayan=MayanConfig(referrer_addresses={}),
    lifi=LifiConfig(integrator="cetus"),
)

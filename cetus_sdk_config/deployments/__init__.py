from .burn import burn_mainnet
from .farms import farms_mainnet, farms_testnet
from .zap import zap_mainnet, zap_testnet
from .clmm import clmm_testnet
from .dlmm import dlmm_mainnet, dlmm_testnet
from .limit import limit_mainnet
from .vaults import vaults_mainnet
from .cross_swap import cross_swap_mainnet

ALL_DEPLOYMENTS = [
    burn_mainnet,
    farms_mainnet,
    farms_testnet,
    zap_mainnet,
    zap_testnet,
    clmm_testnet,
    dlmm_mainnet,
    dlmm_testnet,
    limit_mainnet,
    vaults_mainnet,
    cross_swap_mainnet,
]

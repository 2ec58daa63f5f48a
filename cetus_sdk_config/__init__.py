from .config import (
    BurnSdkOptions,
    ClmmSdkOptions,
    CrossSwapSdkOptions,
    DlmmSdkOptions,
    Env,
    FarmsSdkOptions,
    LifiConfig,
    LimitSdkOptions,
    MayanConfig,
    Package,
    SdkOptions,
    VaultsSdkOptions,
    ZapSdkOptions,
    is_sui_address,
)
from .errors import SdkConfigError
from .registries import SdkOptionsRegistry, with_full_rpc_url, with_providers
from .deployments import (
    ALL_DEPLOYMENTS,
    burn_mainnet,
    clmm_testnet,
    cross_swap_mainnet,
    dlmm_mainnet,
    dlmm_testnet,
    farms_mainnet,
    farms_testnet,
    limit_mainnet,
    vaults_mainnet,
    zap_mainnet,
    zap_testnet,
)

registry = SdkOptionsRegistry(ALL_DEPLOYMENTS)

create_sdk_options = registry.create

__all__ = [
    "Env",
    "Package",
    "SdkOptions",
    "BurnSdkOptions",
    "FarmsSdkOptions",
    "ZapSdkOptions",
    "ClmmSdkOptions",
    "DlmmSdkOptions",
    "LimitSdkOptions",
    "VaultsSdkOptions",
    "CrossSwapSdkOptions",
    "MayanConfig",
    "LifiConfig",
    "SdkConfigError",
    "SdkOptionsRegistry",
    "registry",
    "create_sdk_options",
    "with_providers",
    "with_full_rpc_url",
    "is_sui_address",
    "burn_mainnet",
    "farms_mainnet",
    "farms_testnet",
    "zap_mainnet",
    "zap_testnet",
    "clmm_testnet",
    "dlmm_mainnet",
    "dlmm_testnet",
    "limit_mainnet",
    "vaults_mainnet",
    "cross_swap_mainnet",
]

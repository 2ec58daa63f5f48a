from dataclasses import dataclass, field, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple

from web3 import Web3

from .constants import PROVIDERS, SUI_ADDRESS_LENGTH
from .errors import SdkConfigError


class Env(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"

    @classmethod
    def parse(cls, value) -> "Env":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise SdkConfigError(f"Unknown environment: {value!r}", field="env") from None


def is_sui_address(value: Any) -> bool:
    """True for a 0x-prefixed, 32-byte lowercase hex address."""
    if not isinstance(value, str) or not value.startswith("0x") or value != value.lower():
        return False
    if len(value) != 2 + 2 * SUI_ADDRESS_LENGTH:
        return False
    try:
        return len(Web3.to_bytes(hexstr=value)) == SUI_ADDRESS_LENGTH
    except ValueError:
        return False


def _freeze(value):
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (Package, MayanConfig, LifiConfig)):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


@dataclass(frozen=True)
class Package:
    """
    On-chain package targeted by one SDK module.

    `config` maps a role name (e.g. "manager_id", "global_config_id") to the
    object it refers to. Roles ending in `_id` or `_handle` hold an object
    address, or an empty string when the object is not deployed on that network.
    """

    package_id: str
    published_at: str
    version: Optional[int] = None
    config: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "config", _freeze(self.config))

    def validate(self, name: str = "package") -> None:
        if not is_sui_address(self.package_id):
            raise SdkConfigError(f"{name}.package_id is not a valid address: {self.package_id!r}", field=f"{name}.package_id")
        if not is_sui_address(self.published_at):
            raise SdkConfigError(f"{name}.published_at is not a valid address: {self.published_at!r}", field=f"{name}.published_at")
        if self.version is not None:
            if isinstance(self.version, bool) or not isinstance(self.version, int) or self.version < 1:
                raise SdkConfigError(f"{name}.version must be a positive integer, got {self.version!r}", field=f"{name}.version")
        for role, value in self.config.items():
            if not role.endswith(("_id", "_handle")):
                continue
            # Empty means the object is not deployed on this network
            if value != "" and not is_sui_address(value):
                raise SdkConfigError(f"{name}.config.{role} is not a valid address: {value!r}", field=f"{name}.config.{role}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "package_id": self.package_id,
            "published_at": self.published_at,
            "version": self.version,
            "config": _thaw(self.config),
        }


@dataclass(frozen=True)
class MayanConfig:
    # Wallets receiving the referrer fee, keyed by chain family (solana, sui, evm)
    referrer_addresses: Mapping[str, str] = field(default_factory=dict)
    referrer_bps: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "referrer_addresses", _freeze(self.referrer_addresses))

    def to_dict(self) -> Dict[str, Any]:
        return {"referrer_addresses": _thaw(self.referrer_addresses), "referrer_bps": self.referrer_bps}


@dataclass(frozen=True)
class LifiConfig:
    integrator: str
    api_key: Optional[str] = None
    # 0.03 = 3% integrator fee
    referrer_bps: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"integrator": self.integrator, "api_key": self.api_key, "referrer_bps": self.referrer_bps}


@dataclass(frozen=True, kw_only=True)
class SdkOptions:
    """
    Network and contract parameters handed to an SDK at construction time.

    Subclasses declare the package sub-configs their SDK reads; the base record
    only carries the endpoints shared by every module.
    """

    sdk_name: ClassVar[str] = ""

    env: Env
    full_rpc_url: Optional[str] = None
    graph_rpc_url: Optional[str] = None
    aggregator_url: Optional[str] = None
    providers: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        object.__setattr__(self, "env", Env.parse(self.env))
        if self.providers is not None:
            object.__setattr__(self, "providers", tuple(self.providers))
        for name in self._package_fields():
            value = getattr(self, name)
            if isinstance(value, Mapping):
                try:
                    value = Package(**value)
                except TypeError as e:
                    raise SdkConfigError(f"{name} is not a valid package: {e}", field=name) from None
                object.__setattr__(self, name, value)

    @classmethod
    def _package_fields(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if f.type in (Package, Optional[Package]))

    def packages(self) -> Dict[str, Package]:
        """Package sub-configs present on this record, by field name."""
        return {name: getattr(self, name) for name in self._package_fields() if getattr(self, name) is not None}

    def validate(self) -> None:
        for name in ("full_rpc_url", "graph_rpc_url", "aggregator_url"):
            url = getattr(self, name)
            if url is not None and not url.startswith(("http://", "https://")):
                raise SdkConfigError(f"{name} must be an http(s) url, got {url!r}", field=name)

        if self.providers is not None:
            unknown = [p for p in self.providers if p not in PROVIDERS]
            if unknown:
                raise SdkConfigError(f"Unknown providers: {', '.join(unknown)}", field="providers")
            if len(set(self.providers)) != len(self.providers):
                raise SdkConfigError("providers contains duplicates", field="providers")

        for name, package in self.packages().items():
            if not isinstance(package, Package):
                raise SdkConfigError(f"{name} must be a Package, got {type(package).__name__}", field=name)
            package.validate(name)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: _thaw(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True, kw_only=True)
class BurnSdkOptions(SdkOptions):
    sdk_name: ClassVar[str] = "burn"

    burn: Package


@dataclass(frozen=True, kw_only=True)
class FarmsSdkOptions(SdkOptions):
    sdk_name: ClassVar[str] = "farms"

    farms: Package


@dataclass(frozen=True, kw_only=True)
class ZapSdkOptions(SdkOptions):
    sdk_name: ClassVar[str] = "zap"

    pyth_urls: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        super().__post_init__()
        if self.pyth_urls is not None:
            object.__setattr__(self, "pyth_urls", tuple(self.pyth_urls))

    def validate(self) -> None:
        if not self.aggregator_url:
            raise SdkConfigError("aggregator_url is required", field="aggregator_url")
        if self.providers is None:
            raise SdkConfigError("providers is required", field="providers")
        if len(self.providers) == 0:
            raise SdkConfigError("providers is empty", field="providers")
        super().validate()


@dataclass(frozen=True, kw_only=True)
class ClmmSdkOptions(SdkOptions):
    sdk_name: ClassVar[str] = "clmm"

    cetus_config: Package
    clmm_pool: Package
    integrate: Package
    clmm_vest: Optional[Package] = None
    stats_pools_url: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class DlmmSdkOptions(SdkOptions):
    sdk_name: ClassVar[str] = "dlmm"

    dlmm_pool: Package
    dlmm_router: Package
    faucet: Optional[Package] = None


@dataclass(frozen=True, kw_only=True)
class LimitSdkOptions(SdkOptions):
    sdk_name: ClassVar[str] = "limit"

    limit_order: Package


@dataclass(frozen=True, kw_only=True)
class VaultsSdkOptions(SdkOptions):
    sdk_name: ClassVar[str] = "vaults"

    vaults: Package
    vest: Package


@dataclass(frozen=True, kw_only=True)
class CrossSwapSdkOptions(SdkOptions):
    sdk_name: ClassVar[str] = "cross_swap"

    mayan: MayanConfig
    lifi: LifiConfig

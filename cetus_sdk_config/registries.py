import dataclasses
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .config import Env, SdkOptions
from .errors import SdkConfigError

logger = logging.getLogger(__name__)


class SdkOptionsRegistry:
    """
    Options records keyed by (sdk name, environment).

    Records are validated once on registration and handed out as-is; they are
    frozen, so every caller sees the same object.
    """

    def __init__(self, deployments: Iterable[SdkOptions] = ()):
        self._options: Dict[Tuple[str, Env], SdkOptions] = {}
        for options in deployments:
            self.register(options)

    def register(self, options: SdkOptions, env=None) -> None:
        sdk = options.sdk_name
        if not sdk:
            raise SdkConfigError(f"{type(options).__name__} does not name an sdk")

        env = options.env if env is None else Env.parse(env)
        if options.env != env:
            raise SdkConfigError(
                f"{sdk} options declare env {options.env.value!r} but were registered under {env.value!r}",
                field="env",
            )
        options.validate()

        key = (sdk, env)
        if key in self._options:
            raise SdkConfigError(f"{sdk} already has {env.value} options registered")
        self._options[key] = options
        logger.debug("Registered %s options for %s", sdk, env.value)

    def find(self, sdk: str, env="mainnet") -> Optional[SdkOptions]:
        return self._options.get((sdk, Env.parse(env)))

    def get(self, sdk: str, env="mainnet") -> SdkOptions:
        options = self.find(sdk, env)
        if options is None:
            if sdk not in self.sdks():
                raise SdkConfigError(f"Unknown sdk: {sdk!r}")
            raise SdkConfigError(f"{sdk} has no {Env.parse(env).value} deployment", field="env")
        return options

    def list(self, sdk: Optional[str] = None) -> List[SdkOptions]:
        return [options for (name, _), options in self._options.items() if sdk is None or name == sdk]

    def sdks(self) -> List[str]:
        return sorted({name for name, _ in self._options})

    def envs(self, sdk: str) -> List[Env]:
        return [env for name, env in self._options if name == sdk]

    def create(self, sdk: str, env="mainnet", **overrides) -> SdkOptions:
        """
        Build the options an SDK should be constructed with.

        Starts from the registered record for `env` (mainnet when omitted) and
        applies `overrides` on top, e.g. a private `full_rpc_url`. The
        registered record itself is left untouched.
        """
        base = self.get(sdk, env)
        if not overrides:
            return base

        try:
            options = dataclasses.replace(base, **overrides)
        except TypeError as e:
            raise SdkConfigError(f"Invalid override for {sdk}: {e}") from e
        options.validate()
        logger.debug(
            "Created %s options for %s",
            sdk,
            options.env.value,
            extra={"context": {"sdk": sdk, "env": options.env.value, "overrides": sorted(overrides)}},
        )
        return options


def with_providers(options: SdkOptions, providers: Iterable[str]) -> SdkOptions:
    """Copy of `options` routing through `providers` only."""
    providers = tuple(providers)
    if len(providers) == 0:
        raise SdkConfigError("providers is empty", field="providers")
    updated = dataclasses.replace(options, providers=providers)
    updated.validate()
    return updated


def with_full_rpc_url(options: SdkOptions, url: str) -> SdkOptions:
    updated = dataclasses.replace(options, full_rpc_url=url)
    updated.validate()
    return updated

import argparse
import json
import os
import sys

from dotenv import load_dotenv

from . import registry
from .errors import SdkConfigError
from .logging_config import setup_logging

# Endpoint overrides read by `show`, formatted with the upper-cased env name
ENDPOINT_VARS = {
    "full_rpc_url": "SUI_FULL_RPC_URL_{env}",
    "graph_rpc_url": "SUI_GRAPH_RPC_URL_{env}",
    "aggregator_url": "CETUS_AGGREGATOR_URL_{env}",
}


def endpoint_overrides(options) -> dict:
    """Endpoints set in the environment for fields the record already carries."""
    overrides = {}
    for name, var in ENDPOINT_VARS.items():
        value = os.getenv(var.format(env=options.env.value.upper()))
        if value and getattr(options, name) is not None:
            overrides[name] = value
    return overrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cetus_sdk_config", description="Cetus SDK deployment options")
    parser.add_argument("--log-level", type=str, default=os.getenv("LOG_LEVEL", "WARNING"), help="Logging level")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List registered sdk/env pairs")
    list_parser.add_argument("--sdk", type=str, default=None, help="Only list this sdk")

    show_parser = subparsers.add_parser("show", help="Print the options record for an sdk as JSON")
    show_parser.add_argument("sdk", type=str, help="SDK name (burn, farms, zap, ...)")
    show_parser.add_argument("--env", type=str, default="mainnet", help="Deployment environment (mainnet, testnet)")
    return parser


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, structured=args.json_logs)

    try:
        if args.command == "list":
            if args.sdk is not None and args.sdk not in registry.sdks():
                raise SdkConfigError(f"Unknown sdk: {args.sdk!r}")
            for options in registry.list(args.sdk):
                print(f"{options.sdk_name}\t{options.env.value}")
        else:
            options = registry.get(args.sdk, args.env)
            overrides = endpoint_overrides(options)
            if overrides:
                options = registry.create(args.sdk, args.env, **overrides)
            print(json.dumps(options.to_dict(), indent=2))
    except SdkConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

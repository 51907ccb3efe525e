"""Command line access to the configured secret store provider.

    python -m external_secrets get prod/db --property password
    python -m external_secrets get-map prod/app-env

The provider is built from the environment (see :mod:`external_secrets.config`)
and logs are written to stderr as JSON.
"""
from __future__ import annotations

import argparse
import json
import sys

from external_secrets import providers
from external_secrets.apis import ExternalSecretDataRemoteRef
from external_secrets.observability import configure_logging, correlation_context

SERVICE_NAME = "external-secrets-cli"


def cmd_get(args: argparse.Namespace) -> None:
    ref = ExternalSecretDataRemoteRef(key=args.key, property=args.property, version=args.version)
    value = providers.get_provider().get_secret(ref)
    sys.stdout.buffer.write(value)
    sys.stdout.buffer.flush()


def cmd_get_map(args: argparse.Namespace) -> None:
    ref = ExternalSecretDataRemoteRef(key=args.key, version=args.version)
    data = providers.get_provider().get_secret_map(ref)
    sys.stdout.buffer.write(json.dumps(data, indent=2, sort_keys=True).encode("utf-8"))
    sys.stdout.buffer.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Read secrets from the configured secret store")
    parser.add_argument("--log-level", default="WARNING", help="Log level for stderr output")
    parser.set_defaults(func=None)

    sub = parser.add_subparsers(dest="command")

    get_parser = sub.add_parser("get", help="Print a secret value or one of its properties")
    get_parser.add_argument("key", help="Secret name or ARN")
    get_parser.add_argument("--property", default="", help="Dot separated path into a JSON secret")
    get_parser.add_argument("--version", default="", help="Version stage to read instead of AWSCURRENT")
    get_parser.set_defaults(func=cmd_get)

    map_parser = sub.add_parser("get-map", help="Print a JSON secret as key/value pairs")
    map_parser.add_argument("key", help="Secret name or ARN")
    map_parser.add_argument("--version", default="", help="Version stage to read instead of AWSCURRENT")
    map_parser.set_defaults(func=cmd_get_map)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return
    configure_logging(SERVICE_NAME, level=args.log_level.upper())
    with correlation_context():
        try:
            args.func(args)
        except (RuntimeError, ValueError) as exc:
            parser.error(str(exc))


if __name__ == "__main__":  # pragma: no cover - CLI entry-point
    main()

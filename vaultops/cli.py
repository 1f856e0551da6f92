"""
vaultops CLI — entry point for all operations.

Usage:
    vaultops --url URL --token TOKEN --team TEAM configure
    vaultops --team TEAM secret list
    vaultops --team TEAM secret add KEY VALUE
    vaultops --team TEAM secret get KEY
    vaultops --team TEAM secret remove KEY
    vaultops version
    vaultops                # interactive prompts
"""

from __future__ import annotations

import argparse
import logging
import sys

import hvac.exceptions
import requests

from vaultops.config import Credentials, get_config
from vaultops.vault.errors import SecretNotFoundError, VaultOpsError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    cfg = get_config()

    parser = argparse.ArgumentParser(
        prog="vaultops",
        description="vaultops — work with team secrets on HashiCorp Vault.",
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--url", default=cfg.url, help="The vault base URL")
    parser.add_argument("--token", default=cfg.token, help="The vault token")
    parser.add_argument("--team", default=cfg.team, help="The team name (engine mount)")

    subparsers = parser.add_subparsers(dest="command")

    # configure
    subparsers.add_parser("configure", help="Configure the team structure on the vault")

    # secret
    secret_parser = subparsers.add_parser("secret", help="Options for working with secrets")
    secret_sub = secret_parser.add_subparsers(dest="secret_command")
    secret_sub.add_parser("list", help="List all secrets")
    add_parser = secret_sub.add_parser("add", help="Add a new secret")
    add_parser.add_argument("key", help="Secret name")
    add_parser.add_argument("value", help="Secret value")
    get_parser = secret_sub.add_parser("get", help="Get an existing secret")
    get_parser.add_argument("key", help="Secret name")
    remove_parser = secret_sub.add_parser("remove", help="Remove an existing secret")
    remove_parser.add_argument("key", help="Secret name")

    # version
    subparsers.add_parser("version", help="Show version")

    return parser


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        _setup_logging(verbose=False)
        return _cmd_interactive()

    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(verbose=args.verbose)

    if args.version or args.command == "version":
        from vaultops import __version__

        print(f"vaultops {__version__}")
        return 0

    if args.command is None:
        parser.print_help()
        return 0

    return dispatch(args)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def dispatch(args: argparse.Namespace) -> int:
    """Run the command described by args; shared by flags and prompts."""
    creds = get_config().credentials(url=args.url, token=args.token, team=args.team)

    try:
        if args.command == "configure":
            return _cmd_configure(creds)
        elif args.command == "secret":
            return _cmd_secret(args, creds)
        else:
            print(f"Unknown command: {args.command}")
            return 1
    except (hvac.exceptions.VaultError, requests.exceptions.RequestException, VaultOpsError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}")
        return 1


def _cmd_interactive() -> int:
    from vaultops.prompts import run_prompts

    try:
        args = run_prompts()
    except (EOFError, KeyboardInterrupt):
        print("\nAborted.")
        return 1
    return dispatch(args)


def _cmd_configure(creds: Credentials) -> int:
    from vaultops.vault import enable_engine

    engine = enable_engine(creds)
    print(f"The vault token for the team {engine.name}: {engine.token}")
    return 0


def _cmd_secret(args: argparse.Namespace, creds: Credentials) -> int:
    from vaultops import vault

    sub = getattr(args, "secret_command", None)

    if sub == "list":
        keys = vault.list_secrets(creds)
        print(f"List of all secrets: [{' '.join(keys)}]")
        return 0

    elif sub == "add":
        vault.put_secret(args.key, args.value, creds)
        print("New secret has been created")
        return 0

    elif sub == "get":
        value = vault.get_secret(args.key, creds)
        if value is None:
            raise SecretNotFoundError(args.key)
        print(f"Retrieved a secret: {args.key} -> {value}")
        return 0

    elif sub == "remove":
        vault.delete_secret(args.key, creds)
        print(f"{args.key} has been deleted!")
        return 0

    else:
        print("Usage: vaultops secret {list|add|get|remove}")
        return 0


if __name__ == "__main__":
    sys.exit(main())

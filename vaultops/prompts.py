"""
Interactive prompt flow, used when vaultops is run without arguments.

Collects the same fields the flag CLI takes and returns them as an
argparse.Namespace, so both entry styles go through one dispatcher.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from vaultops.config import DEFAULT_TEAM, VaultOpsConfig, get_config

logger = logging.getLogger(__name__)

CONFIGURE = "Configure the team structure on the vault"
SECRETS = "Options for working with secrets"
SECRET_COMMANDS = ["list", "add", "get", "remove"]

InputFn = Callable[[str], str]


def prompt_list(
    choices: list[str],
    message: str,
    default: str,
    *,
    input_fn: InputFn | None = None,
) -> str:
    """Ask the user to pick one of choices, by name or 1-based number."""
    ask = input_fn or input
    print(message)
    for i, choice in enumerate(choices, 1):
        marker = "*" if choice == default else " "
        print(f" {marker} {i}) {choice}")

    while True:
        answer = ask(f"[{default}]: ").strip()
        if not answer:
            return default
        if answer in choices:
            return answer
        if answer.isdigit() and 1 <= int(answer) <= len(choices):
            return choices[int(answer) - 1]
        print(f"Please choose one of 1-{len(choices)}.")


def prompt_input(
    message: str,
    default: str = "",
    *,
    secret: bool = False,
    input_fn: InputFn | None = None,
) -> str:
    """Ask for a free-form value; an empty answer takes the default.

    With secret=True a default is still used but only shown as [***].
    """
    ask = input_fn or input
    shown = "***" if secret else default
    suffix = f" [{shown}]" if default else ""
    answer = ask(f"{message}{suffix}: ").strip()
    return answer or default


def run_prompts(
    config: VaultOpsConfig | None = None,
    *,
    input_fn: InputFn | None = None,
) -> argparse.Namespace:
    """Walk the user through command, credentials and secret arguments."""
    cfg = config or get_config()

    command = prompt_list(
        [CONFIGURE, SECRETS], "Please select your command", CONFIGURE, input_fn=input_fn
    )
    url = prompt_input("The vault base URL", cfg.url, input_fn=input_fn)
    team = prompt_input("The team name", cfg.team or DEFAULT_TEAM, input_fn=input_fn)

    token_msg = "The vault root token" if command == CONFIGURE else "The vault team token"
    token = prompt_input(token_msg, cfg.token, secret=True, input_fn=input_fn)

    args = argparse.Namespace(url=url, token=token, team=team, key=None, value=None)

    if command == CONFIGURE:
        args.command = "configure"
        args.secret_command = None
        return args

    args.command = "secret"
    args.secret_command = prompt_list(
        SECRET_COMMANDS, "Please select your command", "list", input_fn=input_fn
    )
    if args.secret_command in ("add", "get", "remove"):
        args.key = prompt_input("Secret Name", input_fn=input_fn)
    if args.secret_command == "add":
        args.value = prompt_input("Secret Value", input_fn=input_fn)

    logger.debug("Prompted command: %s %s", args.command, args.secret_command or "")
    return args

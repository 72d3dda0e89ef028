#!/usr/bin/env python3
"""
Command line access to repository and environment variables.

Usage:
    python -m ghvars list OWNER/NAME [--environment ENV] [--per-page N] [--auto-paginate]
    python -m ghvars get OWNER/NAME VARIABLE [--environment ENV]
    python -m ghvars create OWNER/NAME VARIABLE VALUE [--environment ENV]
    python -m ghvars update OWNER/NAME VARIABLE VALUE [--new-name NAME] [--environment ENV]
    python -m ghvars delete OWNER/NAME VARIABLE [--environment ENV]

The token and endpoint are read from GHVARS_ACCESS_TOKEN and GHVARS_API_ENDPOINT.
"""

import argparse
import json
import logging
import sys

import httpx

from ghvars.client import Client, get_default_client
from ghvars.ghvars_error import GhvarsError

_LOGGER = logging.getLogger(__name__)


def _repo(value: str):
    return int(value) if value.isdigit() else value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghvars", description="Manage GitHub Actions variables"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_command(name: str, help: str) -> argparse.ArgumentParser:
        subparser = subparsers.add_parser(name, help=help)
        subparser.add_argument("repo", type=_repo, help="Repository id or OWNER/NAME")
        subparser.add_argument(
            "--environment", "-e", help="Environment name (default: repository scope)"
        )
        return subparser

    list_parser = add_command("list", "List variables")
    list_parser.add_argument("--per-page", type=int, help="Page size (1-100)")
    list_parser.add_argument(
        "--auto-paginate", action="store_true", help="Fetch every page"
    )

    get_parser = add_command("get", "Get a variable")
    get_parser.add_argument("name")

    create_parser = add_command("create", "Create a variable")
    create_parser.add_argument("name")
    create_parser.add_argument("value")

    update_parser = add_command("update", "Update a variable")
    update_parser.add_argument("name")
    update_parser.add_argument("value")
    update_parser.add_argument("--new-name", help="Rename the variable")

    delete_parser = add_command("delete", "Delete a variable")
    delete_parser.add_argument("name")
    return parser


def run(client: Client, args: argparse.Namespace) -> dict:
    env = args.environment
    if args.command == "list":
        if args.per_page is not None:
            client.per_page = args.per_page
        if args.auto_paginate:
            client.auto_paginate = True
        if env:
            result = client.list_actions_environment_variables(args.repo, env)
        else:
            result = client.list_actions_variables(args.repo)
        return result.model_dump(mode="json")
    if args.command == "get":
        if env:
            result = client.get_actions_environment_variable(args.repo, env, args.name)
        else:
            result = client.get_actions_variable(args.repo, args.name)
        return result.model_dump(mode="json")
    if args.command == "create":
        if env:
            client.create_actions_environment_variable(args.repo, env, args.name, args.value)
        else:
            client.create_actions_variable(args.repo, args.name, args.value)
        return {"created": True, "status": client.last_response.status_code}
    if args.command == "update":
        if env:
            client.update_actions_environment_variable(
                args.repo, env, args.name, args.value, args.new_name
            )
        else:
            client.update_actions_variable(args.repo, args.name, args.value, args.new_name)
        return {"updated": True, "status": client.last_response.status_code}
    if env:
        deleted = client.delete_actions_environment_variable(args.repo, env, args.name)
    else:
        deleted = client.delete_actions_variable(args.repo, args.name)
    return {"deleted": deleted, "status": client.last_response.status_code}


def main(argv: list[str] | None = None, client: Client | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)

    try:
        with client or get_default_client() as active_client:
            result = run(active_client, args)
    except (GhvarsError, httpx.TransportError, ValueError) as e:
        _LOGGER.debug("command_failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()

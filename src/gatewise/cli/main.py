"""CLI entrypoint for gatewise."""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from pathlib import Path

from gatewise import __version__
from gatewise.breakages.validation import validate_breakage_file
from gatewise.conditions.factory import run
from gatewise.conditions.loader import load_condition_file
from gatewise.conditions.validation import validate_descriptor
from gatewise.config import GatewiseConfig, load_config
from gatewise.config.resolution import build_activator, build_cookie_store
from gatewise.constants.branding import CLI_DESCRIPTION
from gatewise.constants.breakages import BREAKAGE_KINDS
from gatewise.constants.validation import COND000
from gatewise.exceptions import ConditionConfigError, ConfigError, GatewiseError
from gatewise.exceptions.validation import ValidationError, format_errors

EXIT_OK = 0
EXIT_NOT_MET = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="gatewise",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Evaluate a condition file against a URL")
    check.add_argument("-C", "--condition", type=Path, required=True, help="Condition descriptor file (YAML/JSON)")
    check.add_argument("-u", "--url", required=True, help="URL placed in the evaluation context")
    _add_config_args(check)
    _add_cookie_args(check)

    match = subparsers.add_parser("match", help="Find the breakage notice that applies to a URL")
    match.add_argument("-u", "--url", required=True, help="URL to match")
    match.add_argument(
        "-k",
        "--kind",
        choices=list(BREAKAGE_KINDS),
        default="tab",
        help="Breakage list to consult: tab (default) or webrequest",
    )
    match.add_argument("--tab-id", type=int, default=None, help="Tab id placed in the evaluation context")
    match.add_argument("--dry-run", action="store_true", help="Do not record the domain as notified")
    _add_config_args(match)
    _add_cookie_args(match)

    validate = subparsers.add_parser("validate", help="Validate condition and breakage files")
    validate.add_argument(
        "-C",
        "--condition",
        type=Path,
        action="append",
        default=[],
        help="Condition descriptor file (repeat flag for multiple files)",
    )
    validate.add_argument(
        "-b",
        "--breakages",
        type=Path,
        action="append",
        default=[],
        help="Breakage list file (repeat flag for multiple files)",
    )

    for sub in (check, match, validate):
        sub.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")

    return parser


def _add_config_args(sub: argparse.ArgumentParser) -> None:
    sub.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding gatewise.yaml")
    sub.add_argument("-c", "--config", type=Path, help="Explicit config file")


def _add_cookie_args(sub: argparse.ArgumentParser) -> None:
    cookies = sub.add_mutually_exclusive_group()
    cookies.add_argument("--cookies-db", type=Path, default=None, help="Firefox cookies.sqlite to read cookies from")
    cookies.add_argument("--cookies-file", type=Path, default=None, help="YAML/JSON cookie list")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate":
        return _handle_validate(args)

    try:
        config = _resolve_config(args)
        if args.command == "check":
            return _handle_check(args, config)
        if args.command == "match":
            return _handle_match(args, config)
    except (ConfigError, ConditionConfigError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except GatewiseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_NOT_MET

    parser.error(f"Unsupported command: {args.command}")
    return EXIT_CONFIG_ERROR


def _resolve_config(args: argparse.Namespace) -> GatewiseConfig:
    """Load config and apply cookie-source flags on top of it."""
    config = load_config(args.root, args.config)
    if args.cookies_db is not None:
        return dataclasses.replace(config, cookies_db=args.cookies_db.resolve(), cookies_file=None)
    if args.cookies_file is not None:
        return dataclasses.replace(config, cookies_db=None, cookies_file=args.cookies_file.resolve())
    return config


def _handle_check(args: argparse.Namespace, config: GatewiseConfig) -> int:
    descriptor = load_condition_file(args.condition)
    cookie_store = build_cookie_store(config)
    passed = asyncio.run(run(descriptor, {"url": args.url}, cookie_store=cookie_store))
    print("PASS" if passed else "FAIL")
    return EXIT_OK if passed else EXIT_NOT_MET


def _handle_match(args: argparse.Namespace, config: GatewiseConfig) -> int:
    activator = build_activator(config)
    breakage = asyncio.run(activator.maybe_notify(args.url, args.kind, tab_id=args.tab_id, dry_run=args.dry_run))
    if breakage is None:
        print("No breakage matched.")
        return EXIT_NOT_MET

    payload = {
        "domains": list(breakage.domains),
        "kind": breakage.kind,
        "message": breakage.message,
        "source": breakage.source,
    }
    print(json.dumps(payload, indent=2, sort_keys=True))
    return EXIT_OK


def _handle_validate(args: argparse.Namespace) -> int:
    """Validate every given file and report all problems at once."""
    if not args.condition and not args.breakages:
        print("Nothing to validate: pass --condition and/or --breakages", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    errors: list[ValidationError] = []
    for path in args.condition:
        try:
            descriptor = load_condition_file(path)
        except ConfigError as exc:
            errors.append(ValidationError(code=COND000, path=str(path), field="", message=str(exc)))
            continue
        if descriptor is not None:
            errors.extend(validate_descriptor(descriptor, str(path)))
    for path in args.breakages:
        errors.extend(validate_breakage_file(path))

    if errors:
        print(format_errors(errors), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    print("All files are valid.")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())

"""Operator CLI for checking and querying the configured essential database.

Configuration is read from the environment (and a ``.env`` file), e.g.
``DATABASE_TYPE=postgresql DATABASE_POSTGRESQL_HOST=db essential-db check``.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from essential_core.common import EssentialCommon
from essential_core.config.store import ConfigStore, EnvConfigStore
from essential_core.database.coercion import ScalarType
from essential_core.errors import EssentialDatabaseError
from essential_core.support.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="essential-db")
    parser.add_argument("--data-dir", default=".", help="Data directory holding the SQLite file")
    parser.add_argument("--log-level", default=None, help="Log level (defaults to LOG_LEVEL or INFO)")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Connect and report backend status")
    check_parser.set_defaults(handler=_run_check)

    exec_parser = subparsers.add_parser("exec", help="Execute a statement with no result set")
    exec_parser.add_argument("statement", help="Complete SQL statement")
    exec_parser.set_defaults(handler=_run_exec)

    value_parser = subparsers.add_parser("value", help="Print the first column of the first row")
    value_parser.add_argument("statement", help="Complete SQL query")
    value_parser.add_argument(
        "--type",
        dest="target_type",
        default=ScalarType.STRING.value,
        choices=[scalar.value for scalar in ScalarType],
        help="Type to coerce the scalar to",
    )
    value_parser.set_defaults(handler=_run_value)

    return parser


def _run_check(essential: EssentialCommon, args: argparse.Namespace) -> int:
    connector = essential.get_db()
    print(f"backend={essential.backend_kind.value} state={essential.state.value} locator={connector.locator}")
    if not essential.is_ready and connector.failure is not None:
        print(f"error: {connector.failure}", file=sys.stderr)
    return 0 if essential.is_ready else 1


def _run_exec(essential: EssentialCommon, args: argparse.Namespace) -> int:
    essential.execute_query(args.statement)
    return 0


def _run_value(essential: EssentialCommon, args: argparse.Namespace) -> int:
    value = essential.get_value(args.statement, ScalarType(args.target_type))
    print("" if value is None else value)
    return 0


def main(argv: Optional[List[str]] = None, config_factory: Callable[[], ConfigStore] = EnvConfigStore) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, json_format=args.json_logs)

    try:
        essential = EssentialCommon(config_factory(), args.data_dir)
    except EssentialDatabaseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        return args.handler(essential, args)
    except EssentialDatabaseError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        essential.close()


if __name__ == "__main__":
    sys.exit(main())

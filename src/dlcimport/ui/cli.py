from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from dlcimport.app import convert_dlc_csv, register_agent
from dlcimport.config import ConfigurationError, configure_logging, get_conversion_config
from dlcimport.domain.conversion import ConversionError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert Generic DLC CSV exports into archival import batches"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-row details (DEBUG level)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert a Generic DLC CSV export")
    convert.add_argument("input", type=Path, help="Path to the CSV export")
    convert.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Where to write the JSON batch (defaults to INPUT with a .json suffix)",
    )
    convert.add_argument(
        "--repository-id",
        type=str,
        help="Numeric id of the target repository (defaults to config)",
    )
    convert.add_argument(
        "--agents-db",
        type=str,
        help="Database URI of the agent registry (defaults to config)",
    )
    convert.add_argument(
        "--no-agent-registry",
        action="store_true",
        help="Do not look up existing agents; create one per distinct creator",
    )

    agents = subparsers.add_parser("agents", help="Agent registry commands")
    agents_sub = agents.add_subparsers(dest="agents_command", required=True)
    agents_add = agents_sub.add_parser("add", help="Register an existing person agent")
    agents_add.add_argument("name", type=str, help="Primary name of the agent")
    agents_add.add_argument("uri", type=str, help="URI of the agent in the repository")
    agents_add.add_argument(
        "--replace",
        action="store_true",
        help="Overwrite the URI if the name is already registered",
    )
    agents_add.add_argument(
        "--agents-db",
        type=str,
        help="Database URI of the agent registry (defaults to config)",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        config = (
            get_conversion_config(repository_id=parsed_args.repository_id)
            if parsed_args.command == "convert"
            else None
        )
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)

    try:
        if parsed_args.command == "convert":
            outcome = convert_dlc_csv(
                parsed_args.input,
                output_path=parsed_args.output,
                config=config,
                use_registry=not parsed_args.no_agent_registry,
                database_uri=parsed_args.agents_db,
            )
            log.info(
                "Wrote %s record(s) for collection %s to %s",
                outcome.result.records_emitted,
                outcome.result.collection_id,
                outcome.output_path,
            )
        elif parsed_args.command == "agents" and parsed_args.agents_command == "add":
            register_agent(
                parsed_args.name,
                parsed_args.uri,
                replace=parsed_args.replace,
                database_uri=parsed_args.agents_db,
            )
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except ConversionError:
        log.exception("Conversion failed; no output was written")
        sys.exit(1)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()

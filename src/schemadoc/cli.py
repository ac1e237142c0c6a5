import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

from common.config.env import get_env_str
from common.errors import SchemaDocError, sanitize_exception
from schemadoc.config import resolve_config
from schemadoc.report import generate_report

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the schemadoc command."""
    parser = argparse.ArgumentParser(
        prog="schemadoc",
        description="Print a Markdown description of a PostgreSQL schema.",
    )
    parser.add_argument(
        "-d",
        "--db-url",
        default=None,
        help="Database connection string. If not provided, looks for DB_URL env var.",
    )
    parser.add_argument(
        "--schema",
        default=None,
        help="Schema to inspect (default: SCHEMADOC_SCHEMA or 'public')",
    )
    parser.add_argument(
        "--no-samples",
        action="store_true",
        help="Skip sample rows (default: SCHEMADOC_COLLECT_SAMPLES or on)",
    )
    parser.add_argument(
        "--ignore-table",
        action="append",
        default=[],
        metavar="NAME",
        help="Exclude a table by exact name; may be repeated",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level written to stderr (default: LOG_LEVEL or WARNING)",
    )
    return parser


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def run(argv=None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    load_dotenv(override=False)
    _configure_logging(args.log_level or get_env_str("LOG_LEVEL", "WARNING"))

    try:
        config = resolve_config(
            db_url=args.db_url,
            collect_samples=False if args.no_samples else None,
            ignore_tables=args.ignore_table,
            schema_name=args.schema,
        )
        output = asyncio.run(generate_report(config))
    except SchemaDocError as e:
        print(f"Error [{e.code.value}]: {sanitize_exception(e)}", file=sys.stderr)
        return 1
    except Exception:
        logger.error("Report generation failed", exc_info=True)
        return 1

    sys.stdout.write(output)
    sys.stdout.flush()
    return 0


def main() -> None:
    """Console-script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()

"""
CLI commands for blastdoctor.

Usage:
    blastdoctor diagnose
    blastdoctor --database-dir /data/blast list
    python -m blastdoctor.cli.commands diagnose --debug
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from blastdoctor.core.blast_config import get_blastdbcmd
from blastdoctor.core.settings import Settings, get_settings
from blastdoctor.services.blastdbcmd import BlastdbcmdLister
from blastdoctor.services.catalog_service import CatalogError, scan_database_dir
from blastdoctor.services.doctor_service import Doctor
from blastdoctor.utils.logging_setup import parse_level, setup_logging

logger = logging.getLogger(__name__)


def cmd_diagnose(settings: Settings) -> int:
    """Scan the database directory and run the doctor."""
    blastdbcmd = get_blastdbcmd(settings.blast_bin_path)
    catalog = scan_database_dir(settings.database_dir, blastdbcmd)

    doctor = Doctor(
        catalog=catalog,
        lister=BlastdbcmdLister(blastdbcmd),
        database_dir=settings.database_dir,
        config_file=settings.config_file,
    )
    doctor.diagnose()
    return 0


def cmd_list(settings: Settings) -> int:
    """Print the databases found in the database directory."""
    catalog = scan_database_dir(
        settings.database_dir, get_blastdbcmd(settings.blast_bin_path)
    )
    for db in catalog:
        print(f"{db.type.value}\t{db.title}\t{db.name}")
    return 0


COMMANDS = {
    "diagnose": cmd_diagnose,
    "list": cmd_list,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Detect inconsistencies in BLAST databases",
        prog="blastdoctor",
    )
    parser.add_argument(
        "-d", "--database-dir",
        help="Directory containing BLAST databases (overrides DATABASE_DIR)",
    )
    parser.add_argument(
        "-c", "--config-file",
        help="Config file to load and check for writability",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.add_parser(
        "diagnose",
        help="Inspect databases and file permissions for problems",
    )
    subparsers.add_parser(
        "list",
        help="List the databases found in the database directory",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command not in COMMANDS:
        parser.print_help()
        return 1

    settings = get_settings(args.config_file, database_dir=args.database_dir)

    level = logging.DEBUG if args.debug else parse_level(settings.log_level)
    setup_logging("blastdoctor", level=level)

    try:
        return COMMANDS[args.command](settings)
    except CatalogError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())

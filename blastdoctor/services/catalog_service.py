"""
Database catalog.

Discovers the BLAST databases under a directory the same way the search
server does, by asking blastdbcmd to list them recursively.
"""
from __future__ import annotations

import logging
import subprocess
from typing import Iterable, Iterator, List, Optional

from blastdoctor.core.blast_config import (
    BLASTDBCMD,
    CATALOG_LIST_OUTFMT,
    is_multipart_volume,
)
from blastdoctor.schemas.database_schema import Database, DatabaseType

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when the database directory cannot be scanned."""
    pass


class DatabaseCatalog:
    """Ordered, read-only collection of databases."""

    def __init__(self, databases: Optional[Iterable[Database]] = None):
        self._databases: List[Database] = list(databases or [])

    def __iter__(self) -> Iterator[Database]:
        return iter(self._databases)

    def __len__(self) -> int:
        return len(self._databases)


def _to_int(value: str) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_database_line(line: str) -> Optional[Database]:
    """
    Parse one line of ``blastdbcmd -list`` output.

    Args:
        line: Tab-separated name, title, type, sequences, characters, date

    Returns:
        Database, or None for blank lines, multipart volumes and lines
        that do not describe a usable database
    """
    line = line.rstrip("\n")
    if not line.strip():
        return None

    parts = line.split("\t")
    if len(parts) < 3:
        logger.warning(f"Skipping unparseable database listing: {line!r}")
        return None

    name, title, db_type = parts[0], parts[1], parts[2].strip().lower()
    if is_multipart_volume(name):
        return None

    try:
        db_type = DatabaseType(db_type)
    except ValueError:
        logger.warning(f"Skipping database {name} of unknown type {parts[2]!r}")
        return None

    extra = parts[3:6] + [None] * (3 - len(parts[3:6]))
    return Database(
        name=name,
        title=title,
        type=db_type,
        nsequences=_to_int(extra[0]),
        ncharacters=_to_int(extra[1]),
        updated_on=extra[2].strip() if extra[2] else None,
    )


def scan_database_dir(
    database_dir: str,
    blastdbcmd: str = BLASTDBCMD,
) -> DatabaseCatalog:
    """
    Build a catalog of every BLAST database under a directory.

    Args:
        database_dir: Directory to scan recursively
        blastdbcmd: blastdbcmd executable

    Returns:
        DatabaseCatalog in blastdbcmd listing order

    Raises:
        CatalogError: If blastdbcmd cannot be run or reports an error
    """
    cmd = [
        blastdbcmd,
        "-recursive",
        "-list", database_dir,
        "-list_outfmt", CATALOG_LIST_OUTFMT,
    ]
    logger.info(f"Scanning {database_dir} for BLAST databases")

    try:
        result = subprocess.run(
            cmd, capture_output=True, text=True, errors="replace"
        )
    except OSError as e:
        raise CatalogError(f"Could not run {blastdbcmd}: {e}") from e

    if result.returncode != 0:
        error_msg = (result.stderr or "").strip() or "Unknown blastdbcmd error"
        raise CatalogError(f"Could not list databases in {database_dir}: {error_msg}")

    databases = []
    for line in result.stdout.splitlines():
        database = parse_database_line(line)
        if database is not None:
            databases.append(database)

    if not databases:
        logger.warning(f"No BLAST databases found in {database_dir}")

    return DatabaseCatalog(databases)

"""
Sequence identifier extraction via blastdbcmd.
"""
from __future__ import annotations

import logging
import subprocess
from typing import List, Protocol

from blastdoctor.core.blast_config import ACCESSION_OUTFMT, BLASTDBCMD
from blastdoctor.schemas.database_schema import Database

logger = logging.getLogger(__name__)


class IdentifierLister(Protocol):
    """Anything that can list the sequence identifiers of a database."""

    def list_identifiers(self, database: Database) -> List[str]:
        ...


def _build_entry_command(blastdbcmd: str, database_name: str) -> List[str]:
    return [
        blastdbcmd,
        "-entry", "all",
        "-db", database_name,
        "-outfmt", ACCESSION_OUTFMT,
    ]


class BlastdbcmdLister:
    """List identifiers by running ``blastdbcmd -entry all``.

    Failures never propagate: a missing executable, a non-zero exit or a
    corrupt database all produce an empty list.
    """

    def __init__(self, blastdbcmd: str = BLASTDBCMD):
        self.blastdbcmd = blastdbcmd

    def list_identifiers(self, database: Database) -> List[str]:
        cmd = _build_entry_command(self.blastdbcmd, database.name)
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                errors="replace",
            )
        except OSError as e:
            logger.warning(f"Could not run {self.blastdbcmd}: {e}")
            return []

        if result.returncode != 0:
            logger.debug(
                f"{self.blastdbcmd} exited with {result.returncode} for {database.name}"
            )
            return []

        return (result.stdout or "").split()

"""
BLAST database doctor.

Detects inconsistencies in a set of BLAST databases that are likely to
make searches against them misbehave. Every step is read-only; findings
are printed as soon as they are found.
"""
from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, TextIO

from blastdoctor.core.blast_config import seqid_index_files
from blastdoctor.schemas.database_schema import (
    Database,
    DatabaseType,
    Finding,
    FindingKind,
    IdentifierSet,
)
from blastdoctor.services.blastdbcmd import IdentifierLister
from blastdoctor.utils.file_access import is_readable, is_writable

logger = logging.getLogger(__name__)

# Identifiers of the form abc|def make BLAST+ prepend gnl| to them. gi|
# and bbs| are the two such prefixes it recognises and leaves alone.
PROBLEMATIC_ID_RE = re.compile(r"^>(?!gi|bbs)\w+\|\w*$", re.ASCII)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+(?:_\d+)*)", re.ASCII)


def leading_int(seqid: str) -> int:
    """
    Parse the leading integer of a string, ignoring whatever follows.

    Returns 0 when the string does not start with a number.

    Example:
        >>> leading_int("45xyz")
        45
        >>> leading_int("abc")
        0
    """
    match = _LEADING_INT_RE.match(seqid)
    if not match:
        return 0
    return int(match.group(1).replace("_", ""))


def is_numeric_id(seqid: str) -> bool:
    return leading_int(seqid) != 0


def is_problematic_id(seqid: str) -> bool:
    return PROBLEMATIC_ID_RE.match(seqid) is not None


def has_duplicate_ids(seqids: List[str]) -> bool:
    return len(seqids) != len(set(seqids))


def has_seqid_index(database: Database) -> bool:
    """Whether makeblastdb -parse_seqids left an .nsd or .psd file."""
    return any(Path(p).exists() for p in seqid_index_files(database.name))


def inspect_seqids(
    id_sets: Iterable[IdentifierSet],
    selector: Callable[[str], bool],
) -> List[Database]:
    """Databases where at least one identifier satisfies ``selector``."""
    return [s.database for s in id_sets if any(selector(i) for i in s.seqids)]


def inspect_unique_ids(id_sets: Iterable[IdentifierSet]) -> List[Database]:
    return [s.database for s in id_sets if has_duplicate_ids(s.seqids)]


def inspect_file_access(database_dir: str, config_file: str) -> bool:
    """True when the database directory is readable and writable and the
    config file is writable."""
    return (
        is_readable(database_dir)
        and is_writable(config_file)
        and is_writable(database_dir)
    )


@dataclass
class DiagnosisRun:
    """State for a single diagnosis, built by Doctor.init()."""

    invalids: List[Database] = field(default_factory=list)
    nucleotide_ids: List[IdentifierSet] = field(default_factory=list)
    protein_ids: List[IdentifierSet] = field(default_factory=list)

    def identifier_sets(self) -> List[List[IdentifierSet]]:
        """Identifier sets in reporting order: nucleotide first."""
        return [self.nucleotide_ids, self.protein_ids]


class Doctor:
    """Runs the six diagnosis steps against a database catalog."""

    def __init__(
        self,
        catalog: Iterable[Database],
        lister: IdentifierLister,
        database_dir: str,
        config_file: str,
        out: Optional[TextIO] = None,
    ):
        self.catalog = catalog
        self.lister = lister
        self.database_dir = database_dir
        self.config_file = config_file
        self.out = out

    def _print(self, text: str = "") -> None:
        print(text, file=self.out or sys.stdout)

    def report(self, finding: Finding) -> None:
        logger.debug(f"Finding: {finding.kind.value} ({finding.database})")
        self._print(finding.message)

    def diagnose(self) -> None:
        self._print("*** Running BLAST database doctor.")
        self._print("1/6 Building an index of databases. This may take a while..")
        run = self.init()

        self._print("\n2/6 Inspecting databases for proper -parse_seqids formatting..")
        self.check_parse_seqids(run)

        self._print("\n3/6 Inspecting databases for numeric sequence ids..")
        self.check_numeric_ids(run)

        self._print("\n4/6 Inspecting databases for non-unique sequence ids..")
        self.check_unique_ids(run)

        self._print("\n5/6 Inspecting databases for problematic sequence ids..")
        self.check_id_format(run)

        self._print("\n6/6 Inspecting files for consistent file permission..")
        self.check_file_permissions()

    def init(self) -> DiagnosisRun:
        """Index the catalog: find invalid databases, then list the
        identifiers of every remaining one."""
        databases = list(self.catalog)
        invalids = [db for db in databases if not has_seqid_index(db)]
        logger.info(f"{len(invalids)} of {len(databases)} databases lack a seqid index")

        return DiagnosisRun(
            invalids=invalids,
            nucleotide_ids=self.all_sequence_ids(
                databases, DatabaseType.NUCLEOTIDE, invalids
            ),
            protein_ids=self.all_sequence_ids(
                databases, DatabaseType.PROTEIN, invalids
            ),
        )

    def all_sequence_ids(
        self,
        databases: List[Database],
        db_type: DatabaseType,
        invalids: List[Database],
    ) -> List[IdentifierSet]:
        skip = set(invalids)
        id_sets = []
        for db in databases:
            if db.type != db_type or db in skip:
                continue
            id_sets.append(
                IdentifierSet(database=db, seqids=self.lister.list_identifiers(db))
            )
        return id_sets

    def check_parse_seqids(self, run: DiagnosisRun) -> None:
        for db in run.invalids:
            self.report(Finding(kind=FindingKind.IMPROPER_FORMAT, database=db))

    def check_numeric_ids(self, run: DiagnosisRun) -> None:
        for id_sets in run.identifier_sets():
            for db in inspect_seqids(id_sets, is_numeric_id):
                self.report(Finding(kind=FindingKind.NUMERIC_IDS, database=db))

    def check_unique_ids(self, run: DiagnosisRun) -> None:
        for id_sets in run.identifier_sets():
            for db in inspect_unique_ids(id_sets):
                self.report(Finding(kind=FindingKind.NON_UNIQUE_IDS, database=db))

    def check_id_format(self, run: DiagnosisRun) -> None:
        for id_sets in run.identifier_sets():
            for db in inspect_seqids(id_sets, is_problematic_id):
                self.report(Finding(kind=FindingKind.PROBLEMATIC_IDS, database=db))

    def check_file_permissions(self) -> None:
        if inspect_file_access(self.database_dir, self.config_file):
            return
        self.report(Finding(kind=FindingKind.FILE_PERMISSIONS))

"""
BLAST+ configuration.

File naming conventions and command-line constants for the BLAST+ tools
the doctor calls.
"""
from __future__ import annotations

import os
import re
from typing import Dict, List

BLASTDBCMD = "blastdbcmd"

# Sidecar files written by makeblastdb -parse_seqids
# Format: database type -> suffix appended to the database name
SEQID_INDEX_SUFFIXES: Dict[str, str] = {
    "nucleotide": ".nsd",
    "protein": ".psd",
}

# blastdbcmd -list_outfmt fields: path, title, molecule type,
# number of sequences, number of residues, last-updated date
CATALOG_LIST_OUTFMT = "%f\t%t\t%p\t%n\t%l\t%d"

# blastdbcmd -outfmt for accession only
ACCESSION_OUTFMT = "%a"

# Volumes of a multipart database: <dir>/<name>.00, <dir>/<name>.001
MULTIPART_VOLUME_RE = re.compile(r".+/\S+\.\d{2,3}$")


def get_blastdbcmd(blast_bin_path: str = "") -> str:
    """
    Get the blastdbcmd executable.

    Args:
        blast_bin_path: Directory containing BLAST+ binaries; empty to
            rely on PATH

    Returns:
        Path (or bare name) of blastdbcmd
    """
    if not blast_bin_path:
        return BLASTDBCMD
    return os.path.join(blast_bin_path, BLASTDBCMD)


def seqid_index_files(name: str) -> List[str]:
    """Return the candidate -parse_seqids sidecar paths for a database name."""
    return [f"{name}{suffix}" for suffix in SEQID_INDEX_SUFFIXES.values()]


def is_multipart_volume(name: str) -> bool:
    """Whether a database name is one volume of a multipart database."""
    return MULTIPART_VOLUME_RE.match(name) is not None

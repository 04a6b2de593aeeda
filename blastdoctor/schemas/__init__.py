"""
Pydantic models for BLAST databases and diagnosis findings.
"""
from blastdoctor.schemas.database_schema import (
    DatabaseType,
    Database,
    IdentifierSet,
    FindingKind,
    Finding,
)

__all__ = [
    "DatabaseType",
    "Database",
    "IdentifierSet",
    "FindingKind",
    "Finding",
]

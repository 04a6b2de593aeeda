"""
BLAST Database Schemas.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field


class DatabaseType(str, Enum):
    """Molecule type of a BLAST database."""
    NUCLEOTIDE = "nucleotide"
    PROTEIN = "protein"


class Database(BaseModel):
    """One pre-built BLAST database as listed by the catalog."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Path of the database without extension")
    title: str
    type: DatabaseType
    nsequences: Optional[int] = None
    ncharacters: Optional[int] = None
    updated_on: Optional[str] = None


class IdentifierSet(BaseModel):
    """Sequence identifiers extracted from a single database."""
    database: Database
    seqids: List[str] = Field(default_factory=list)


class FindingKind(str, Enum):
    """Kinds of inconsistency the doctor reports."""
    IMPROPER_FORMAT = "improperly formatted database"
    NUMERIC_IDS = "numeric sequence ids"
    NON_UNIQUE_IDS = "non-unique sequence ids"
    PROBLEMATIC_IDS = "problematic sequence ids"
    FILE_PERMISSIONS = "inconsistent file permissions"


PERMISSIONS_HINT = (
    "    Please ensure that your config file and BLAST databases are readable and\n"
    "    writable by your account."
)


class Finding(BaseModel):
    """A single reported inconsistency."""
    model_config = ConfigDict(frozen=True)

    kind: FindingKind
    database: Optional[Database] = None

    @property
    def message(self) -> str:
        if self.kind == FindingKind.FILE_PERMISSIONS:
            return f"*** Doctor has found {self.kind.value}.\n{PERMISSIONS_HINT}"
        if self.kind == FindingKind.IMPROPER_FORMAT:
            return f"*** Doctor has found {self.kind.value}: {self.database.title}"
        return (
            f"*** Doctor has found {self.kind.value} in "
            f"{self.database.type.value} database: {self.database.title}"
        )

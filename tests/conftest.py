"""
Pytest fixtures for blastdoctor tests.

Provides temporary database directories, database factories and a stub
identifier lister so no test needs BLAST+ installed.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

from blastdoctor.schemas.database_schema import Database, DatabaseType


class StubLister:
    """Identifier lister returning canned identifiers per database name."""

    def __init__(self, seqids: Optional[Dict[str, List[str]]] = None):
        self.seqids = seqids or {}
        self.calls: List[str] = []

    def list_identifiers(self, database: Database) -> List[str]:
        self.calls.append(database.name)
        return list(self.seqids.get(database.name, []))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_database(temp_dir):
    """Create a database record, optionally with its seqid index sidecar."""
    def _make(
        stem: str,
        db_type: DatabaseType = DatabaseType.NUCLEOTIDE,
        title: Optional[str] = None,
        indexed: bool = True,
    ) -> Database:
        name = temp_dir / stem
        if indexed:
            suffix = ".nsd" if db_type == DatabaseType.NUCLEOTIDE else ".psd"
            Path(f"{name}{suffix}").write_text("")
        return Database(name=str(name), title=title or stem, type=db_type)
    return _make


@pytest.fixture
def config_file(temp_dir):
    """A writable config file."""
    path = temp_dir / "blastdoctor.env"
    path.write_text("")
    return path


@pytest.fixture
def stub_lister():
    return StubLister


@pytest.fixture
def temp_file(temp_dir):
    """Create a temporary file."""
    def _create_file(name: str, content: str = "") -> Path:
        file_path = temp_dir / name
        file_path.write_text(content)
        return file_path
    return _create_file


@pytest.fixture
def fake_tool(temp_dir):
    """Create an executable that writes fixed bytes to stdout."""
    def _create_tool(output: bytes, name: str = "blastdbcmd") -> Path:
        payload = temp_dir / f"{name}.out"
        payload.write_bytes(output)
        tool = temp_dir / name
        tool.write_text(f"#!/bin/sh\ncat '{payload}'\n")
        tool.chmod(0o755)
        return tool
    return _create_tool

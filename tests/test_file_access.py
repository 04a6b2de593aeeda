"""
Tests for blastdoctor.utils.file_access.
"""
import os

import pytest
from unittest.mock import patch

from blastdoctor.utils.file_access import is_readable, is_writable

running_as_root = hasattr(os, "geteuid") and os.geteuid() == 0


class TestFileAccess:
    """Tests for is_readable and is_writable."""

    def test_existing_file(self, temp_file):
        path = temp_file("a.txt", "x")
        assert is_readable(path)
        assert is_writable(path)

    def test_directory(self, temp_dir):
        assert is_readable(temp_dir)
        assert is_writable(str(temp_dir))

    def test_missing_path(self, temp_dir):
        assert not is_readable(temp_dir / "missing")
        assert not is_writable(temp_dir / "missing")

    @pytest.mark.skipif(running_as_root, reason="root bypasses permission bits")
    def test_read_only_file(self, temp_file):
        path = temp_file("ro.txt", "x")
        path.chmod(0o444)
        assert is_readable(path)
        assert not is_writable(path)

    def test_query_failure_is_false(self):
        with patch('blastdoctor.utils.file_access.os.access', side_effect=OSError("boom")):
            assert not is_readable("/anything")

    def test_invalid_path_is_false(self):
        assert not is_writable("bad\0path")
        assert not is_readable(None)

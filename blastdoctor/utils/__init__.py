"""
blastdoctor utility library.

Modules:
--------
logging_setup
    Logging configuration utilities.
file_access
    Read/write permission probes.
"""

from blastdoctor.utils.logging_setup import setup_logging, parse_level
from blastdoctor.utils.file_access import is_readable, is_writable

__all__ = [
    # logging_setup
    "setup_logging",
    "parse_level",
    # file_access
    "is_readable",
    "is_writable",
]

"""
BLAST database doctor.

Read-only diagnostics for directories of BLAST+ databases.
"""

__version__ = "0.1.0"

"""
blastdoctor core package.

Modules:
- settings: runtime configuration (database directory, config file, BLAST+ path)
- blast_config: BLAST+ file naming and command-line constants

Environment Variables:
    DATABASE_DIR: Directory holding the BLAST databases
    BLASTDOCTOR_CONFIG: Path to the config file
    BLAST_BIN: Directory containing BLAST+ executables
"""

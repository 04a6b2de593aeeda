import os
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blastdoctor.utils.file_access import is_readable

DEFAULT_CONFIG_FILE = "~/.blastdoctor.env"


class Settings(BaseSettings):
    """Runtime settings.

    Values come from keyword arguments, then the environment, then the
    config file (dotenv format).

    Optional:
      - DATABASE_DIR: directory scanned for BLAST databases
      - BLASTDOCTOR_CONFIG: config file; must be writable by the operator
      - BLAST_BIN: directory containing blastdbcmd (empty means use PATH)
      - LOG_LEVEL: logging level name
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
        validate_default=True,
    )

    database_dir: str = Field(
        default="~/db",
        validation_alias="DATABASE_DIR",
    )
    config_file: str = Field(
        default=DEFAULT_CONFIG_FILE,
        validation_alias="BLASTDOCTOR_CONFIG",
    )

    # BLAST configuration
    blast_bin_path: str = Field(
        default="",
        validation_alias="BLAST_BIN",
    )

    log_level: str = Field(default="WARNING", validation_alias="LOG_LEVEL")

    @field_validator("database_dir", "config_file")
    @classmethod
    def _expand_user(cls, value: str) -> str:
        return os.path.expanduser(value)


def get_settings(config_file: Optional[str] = None, **overrides) -> Settings:
    """
    Load settings, reading the config file as a dotenv file.

    The config file path is resolved from the argument, then the
    BLASTDOCTOR_CONFIG environment variable, then the default location.
    A missing or unreadable config file is not an error; the permission
    check reports it later.
    """
    path = os.path.expanduser(
        config_file or os.getenv("BLASTDOCTOR_CONFIG", DEFAULT_CONFIG_FILE)
    )
    values = {"config_file": path}
    values.update({k: v for k, v in overrides.items() if v is not None})

    # Pass values under their environment aliases
    fields = Settings.model_fields
    values = {
        (fields[k].validation_alias if k in fields else k): v
        for k, v in values.items()
    }
    env_file = path if os.path.isfile(path) and is_readable(path) else None
    return Settings(_env_file=env_file, **values)

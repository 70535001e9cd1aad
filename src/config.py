"""Connection settings read from the environment."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DB_NAME = "employee_tracker.db"


@dataclass(frozen=True)
class DatabaseConfig:
    db_name: str = DEFAULT_DB_NAME


def load_config(env_file=None):
    """Load ``.env`` (if any) and build the database settings.

    Variables already present in the environment win over the file.
    """
    load_dotenv(env_file)
    return DatabaseConfig(db_name=os.getenv("DB_NAME") or DEFAULT_DB_NAME)

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables (only in development)
# In containers, environment variables are set directly
if os.getenv("ENVIRONMENT") != "production":
    load_dotenv()

# Sub-directory of the registry root that holds every database: <root>/<DB_DIR_NAME>/<type>/<name>
DB_DIR_NAME = os.getenv("DB_DIR_NAME", "db")

# Default schema file for load_schema()
DB_SCHEMA_FILE = os.getenv("DB_SCHEMA_FILE")


def get_root_dir() -> Path:
    """
    Base path handed to every adapter.

    DB_ROOT_DIR overrides the process working directory. Read on every call so
    that a changed environment or working directory is picked up.
    """
    override: Optional[str] = os.getenv("DB_ROOT_DIR")
    if override:
        return Path(override)
    return Path(os.getcwd())

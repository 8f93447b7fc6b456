"""
Alembic helpers for applying and reverting schema migrations.

Migrations target the URL from `get_database_url()`; `alembic/env.py` reads
it the same way, so SHOESTORE_DATABASE_URL selects the database here too.
"""

import os
from pathlib import Path

from alembic import command
from alembic.config import Config

from ..logging import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def get_alembic_config() -> Config:
    """Load alembic.ini from the project root, or from SHOESTORE_ALEMBIC_INI."""
    ini_path = Path(os.getenv("SHOESTORE_ALEMBIC_INI") or PROJECT_ROOT / "alembic.ini")
    if not ini_path.exists():
        raise FileNotFoundError(f"alembic.ini not found at {ini_path}")
    return Config(str(ini_path))


def upgrade_schema(revision: str = "head") -> None:
    logger.info("Applying migrations", revision=revision)
    command.upgrade(get_alembic_config(), revision)


def downgrade_schema(revision: str = "-1") -> None:
    logger.info("Reverting migrations", revision=revision)
    command.downgrade(get_alembic_config(), revision)

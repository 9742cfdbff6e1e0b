"""Configuration management for the Grocery Planner application."""
import logging
import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
BASE_DIR: Final[Path] = Path(__file__).parent.parent
_env_path = BASE_DIR.parent / '.env'
if _env_path.exists():
    load_dotenv(_env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '127.0.0.1')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'WARNING').upper()

# File Paths
DATA_DIR: Final[Path] = Path(os.getenv('GROCERY_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
EXPORT_DIR: Final[Path] = Path(os.getenv('GROCERY_EXPORT_DIR', str(DATA_DIR / 'exports'))).resolve()

# Backups kept per data file before older ones are pruned
BACKUP_KEEP: Final[int] = int(os.getenv('GROCERY_BACKUP_KEEP', '10'))


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Root logging setup used by the console and server entry points."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

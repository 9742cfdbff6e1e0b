from pathlib import Path

from grocery.utilities.config import DATA_DIR, EXPORT_DIR
from grocery.utilities.constants import INGREDIENTS_FILENAME, RECIPES_FILENAME

# Centralized paths for data files (single source of truth)
INGREDIENTS_FILE: Path = DATA_DIR / INGREDIENTS_FILENAME
RECIPES_FILE: Path = DATA_DIR / RECIPES_FILENAME
BACKUP_DIR: Path = DATA_DIR / 'backups'

__all__ = ['DATA_DIR', 'EXPORT_DIR', 'INGREDIENTS_FILE', 'RECIPES_FILE', 'BACKUP_DIR']

"""Grocery list export to timestamped plain-text files."""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from grocery.domain.errors import PersistenceError
from grocery.domain.GroceryList import GroceryList
from grocery.infra.paths import EXPORT_DIR
from grocery.logic.reporting.grocery_report import render_grocery_file
from grocery.utilities.constants import EXPORT_PREFIX, EXPORT_TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)


def _fresh_path(directory: Path, now: datetime) -> Path:
    stem = f"{EXPORT_PREFIX}_{now.strftime(EXPORT_TIMESTAMP_FORMAT)}"
    candidate = directory / f"{stem}.txt"
    counter = 1
    while candidate.exists():
        candidate = directory / f"{stem}_{counter}.txt"
        counter += 1
    return candidate


def export_grocery_list(grocery_list: GroceryList, directory: Optional[Path] = None,
                        now: Optional[datetime] = None) -> Path:
    """Write grocery_list to a new GroceryList_<timestamp>.txt file and return its path."""
    directory = Path(directory) if directory is not None else EXPORT_DIR
    now = now or datetime.now()
    try:
        directory.mkdir(parents=True, exist_ok=True)
        path = _fresh_path(directory, now)
        # 'x' mode: never overwrite an earlier export
        with open(path, "x", encoding="utf-8") as f:
            f.write(render_grocery_file(grocery_list, now))
    except OSError as e:
        logger.error(f"Error saving grocery list: {e}")
        raise PersistenceError(f"Error saving grocery list: {e}", directory) from e
    logger.info(f"Grocery list saved to: {path}")
    return path


__all__ = ["export_grocery_list"]

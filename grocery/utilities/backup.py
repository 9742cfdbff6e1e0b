"""
Backup utility for Grocery Planner data files.
Copies the current JSON documents aside before they are overwritten.
"""
import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from grocery.utilities.config import BACKUP_KEEP

logger = logging.getLogger(__name__)


class BackupManager:
    """Manages timestamped backups of data files."""

    def __init__(self, backup_dir: Path, keep: int = BACKUP_KEEP):
        self.backup_dir = Path(backup_dir)
        self.keep = keep

    def create_backup(self, source: Path) -> Optional[Path]:
        """Copy source into the backup directory. Returns the copy, or None if there was nothing to back up."""
        source = Path(source)
        if not source.exists():
            return None
        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
            destination = self.backup_dir / f"{source.stem}_{timestamp}{source.suffix}"
            shutil.copy2(source, destination)
        except OSError as e:
            logger.error(f"Backup failed for {source.name}: {e}")
            return None
        logger.info(f"Backup created: {destination.name}")
        self._cleanup_old_backups(source)
        return destination

    def _cleanup_old_backups(self, source: Path):
        """Remove old backups, keeping only the most recent ones."""
        backups = self.list_backups(source)
        for backup in backups[self.keep:]:
            try:
                backup.unlink()
                logger.info(f"Removed old backup: {backup.name}")
            except OSError as e:
                logger.error(f"Failed to remove old backup {backup.name}: {e}")

    def list_backups(self, source: Path) -> List[Path]:
        """Backups of source, newest first."""
        source = Path(source)
        if not self.backup_dir.exists():
            return []
        pattern = f"{source.stem}_*{source.suffix}"
        return sorted(self.backup_dir.glob(pattern), key=lambda p: p.name, reverse=True)

    def backup_all(self, sources) -> Dict[str, bool]:
        return {Path(s).name: self.create_backup(s) is not None for s in sources}

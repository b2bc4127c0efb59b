"""Timestamped backups of files and directories about to be overwritten."""
from __future__ import annotations

import logging
import os
import shutil
from datetime import datetime
from typing import Optional

from constants import Constants
from errors import BackupError

logger = logging.getLogger(__name__)


def backup_name(path: str, now: Optional[datetime] = None) -> str:
    """``<basename>.bak.sb.<dd-Mon-YYYY_HHhMMmSSs>``"""
    now = now or datetime.now()
    base = os.path.basename(os.path.normpath(path))
    return f"{base}{Constants.BACKUP_SUFFIX}{now.strftime(Constants.BACKUP_TIMESTAMP_FORMAT)}"


def backup_path(path: str, backup_dir: str, now: Optional[datetime] = None) -> str:
    """Copy ``path`` into ``backup_dir`` and return the backup location.

    Raises:
        BackupError: ``path`` does not exist or the copy failed.
    """
    if not path:
        raise BackupError("Usage: backup <file_or_directory>")
    if not os.path.exists(path):
        raise BackupError(f"{path} does not exist")

    backup_dir = os.path.expanduser(backup_dir)
    target = os.path.join(backup_dir, backup_name(path, now))
    try:
        os.makedirs(backup_dir, exist_ok=True)
        if os.path.isdir(path):
            shutil.copytree(path, target, symlinks=True)
        else:
            shutil.copy2(path, target)
    except (OSError, shutil.Error) as exc:
        raise BackupError(f"Backup of {path} failed: {exc}") from exc

    logger.info("Backed up to: %s", target)
    return target

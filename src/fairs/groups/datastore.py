#!/usr/bin/env python3
"""
Group DataStore and Backup Files

Persists the group collection as a single JSON file and reads/writes backup
files wrapping groups in a versioned envelope.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from ..core.json_utils import read_json, write_json
from .models import Group

logger = logging.getLogger(__name__)

BACKUP_APP = "fairs"
BACKUP_VERSION = 1


class BackupFormatError(ValueError):
    """Raised when a backup file is not a valid Fairs backup"""

    pass


class GroupDataStore:
    """
    DataStore for the group collection.

    Stores every group in ``<data_dir>/groups.json`` as a list of group dicts.
    """

    def __init__(self, data_dir: Path):
        """
        Initialize group store.

        Args:
            data_dir: Application data directory
        """
        self.data_dir = Path(data_dir)
        self.groups_file = self.data_dir / "groups.json"

    def exists(self) -> bool:
        """Check if the groups file exists."""
        return self.groups_file.exists()

    def load(self) -> list[Group]:
        """
        Load all groups.

        Returns:
            Groups in stored order

        Raises:
            FileNotFoundError: If no groups have been saved yet
            ValueError: If the file does not hold a list of groups
        """
        if not self.exists():
            raise FileNotFoundError(f"Groups file not found: {self.groups_file}")

        data = read_json(self.groups_file)
        if not isinstance(data, list):
            raise ValueError(f"Invalid groups file (expected a list): {self.groups_file}")

        try:
            groups = [Group.from_dict(entry) for entry in data]
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Invalid group entry in {self.groups_file}: {e}") from e

        logger.info("Loaded %d groups from %s", len(groups), self.groups_file)
        return groups

    def save(self, groups: list[Group]) -> None:
        """
        Save all groups, replacing what was stored.

        Args:
            groups: Complete group collection
        """
        write_json(self.groups_file, [group.to_dict() for group in groups])
        logger.info("Saved %d groups to %s", len(groups), self.groups_file)

    def load_groups(self) -> list[Group]:
        """Load all groups; an empty list if nothing has been saved yet."""
        if not self.exists():
            return []
        return self.load()

    def get_group(self, group_id: str) -> Group | None:
        """Find a stored group by id."""
        for group in self.load_groups():
            if group.id == group_id:
                return group
        return None

    def upsert_group(self, group: Group) -> None:
        """Replace the stored group with the same id, or append it."""
        groups = self.load_groups()
        for index, existing in enumerate(groups):
            if existing.id == group.id:
                groups[index] = group
                break
        else:
            groups.append(group)
        self.save(groups)

    def delete_group(self, group_id: str) -> bool:
        """
        Delete a stored group.

        Returns:
            True if a group was removed
        """
        groups = self.load_groups()
        remaining = [group for group in groups if group.id != group_id]
        if len(remaining) == len(groups):
            return False
        self.save(remaining)
        return True

    def last_modified(self) -> datetime | None:
        """Get timestamp of the groups file."""
        if not self.exists():
            return None
        return datetime.fromtimestamp(self.groups_file.stat().st_mtime)

    def age_days(self) -> int | None:
        """Get age in days of the groups file."""
        last_mod = self.last_modified()
        if last_mod is None:
            return None
        return (datetime.now() - last_mod).days

    def item_count(self) -> int | None:
        """Get count of stored groups."""
        if not self.exists():
            return None

        try:
            data = read_json(self.groups_file)
            return len(data) if isinstance(data, list) else 0
        except ValueError:
            return 0

    def size_bytes(self) -> int | None:
        """Get size of the groups file."""
        if not self.exists():
            return None
        return self.groups_file.stat().st_size

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return "No groups saved"
        return f"Groups: {count} saved"


def export_backup(groups: list[Group], exported_at: datetime | None = None) -> dict[str, Any]:
    """
    Wrap groups in a backup envelope.

    Args:
        groups: Groups to back up
        exported_at: Export timestamp (default: now)

    Returns:
        JSON-ready envelope dict
    """
    timestamp = exported_at or datetime.now()
    return {
        "app": BACKUP_APP,
        "version": BACKUP_VERSION,
        "exportedAt": timestamp.isoformat(timespec="seconds"),
        "groups": [group.to_dict() for group in groups],
    }


def import_backup(data: Any) -> list[Group]:
    """
    Unwrap groups from a backup envelope.

    Raises:
        BackupFormatError: If the envelope is missing, from another app,
            from an unsupported version, or holds malformed groups
    """
    if not isinstance(data, dict):
        raise BackupFormatError("Backup must be a JSON object")
    if data.get("app") != BACKUP_APP:
        raise BackupFormatError(f"Not a Fairs backup (app={data.get('app')!r})")
    if data.get("version") != BACKUP_VERSION:
        raise BackupFormatError(f"Unsupported backup version: {data.get('version')!r}")

    entries = data.get("groups")
    if not isinstance(entries, list):
        raise BackupFormatError("Backup has no groups list")

    try:
        return [Group.from_dict(entry) for entry in entries]
    except (KeyError, TypeError, AttributeError) as e:
        raise BackupFormatError(f"Malformed group in backup: {e}") from e


def write_backup(filepath: str | Path, groups: list[Group]) -> None:
    """Write groups to a backup file."""
    write_json(filepath, export_backup(groups))
    logger.info("Wrote backup of %d groups to %s", len(groups), filepath)


def read_backup(filepath: str | Path) -> list[Group]:
    """
    Read groups from a backup file.

    Raises:
        BackupFormatError: If the file is not valid JSON or not a Fairs backup
    """
    try:
        data = read_json(filepath)
    except ValueError as e:
        raise BackupFormatError(f"Backup is not valid JSON: {e}") from e
    return import_backup(data)

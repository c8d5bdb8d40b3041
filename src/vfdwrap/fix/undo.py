"""Undo/rollback support for rewritten files.

Each ``transform --write`` run is a session directory under
``.vfdwrap/backups/<timestamp>/`` holding numbered ``.bak`` copies and a
``manifest.json`` list of ``{"file", "backup", "timestamp"}`` records in
write order.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from vfdwrap.core.config import get_state_dir
from vfdwrap.core.models import WriteResult

MANIFEST = "manifest.json"


@dataclass
class UndoEntry:
    """An undoable rewrite record."""

    file: Path
    backup: Path
    timestamp: str

    def to_dict(self) -> dict:
        return {"file": str(self.file), "backup": str(self.backup), "timestamp": self.timestamp}


def read_manifest(session_dir: Path) -> list[UndoEntry]:
    """Entries of one session, newest first. Missing manifest reads as empty."""
    manifest_file = session_dir / MANIFEST
    if not manifest_file.exists():
        return []
    records = json.loads(manifest_file.read_text())
    return [
        UndoEntry(file=Path(r["file"]), backup=Path(r["backup"]), timestamp=r["timestamp"])
        for r in reversed(records)
    ]


def append_manifest(session_dir: Path, entry: UndoEntry) -> None:
    entries = list(reversed(read_manifest(session_dir)))
    entries.append(entry)
    (session_dir / MANIFEST).write_text(json.dumps([e.to_dict() for e in entries], indent=2))


class UndoManager:
    """Restores files from backups written by the applier."""

    def __init__(self, project_path: Path):
        self.project_path = project_path
        self.backup_dir = get_state_dir(project_path) / "backups"

    def sessions(self) -> list[Path]:
        """Session directories, newest first."""
        if not self.backup_dir.exists():
            return []
        return sorted((p for p in self.backup_dir.iterdir() if p.is_dir()), reverse=True)

    def list_undoable(self) -> list[UndoEntry]:
        """List all rewrites that can be undone, newest first."""
        return [entry for session in self.sessions() for entry in read_manifest(session)]

    def undo(self, file: Path) -> WriteResult:
        """Restore the most recent backup of ``file``."""
        target = (file if file.is_absolute() else self.project_path / file).resolve()

        for entry in self.list_undoable():
            if entry.file.resolve() == target:
                return self._restore(entry)

        return WriteResult(success=False, message=f"No undo history for {file}", file=file)

    def undo_last_session(self) -> list[WriteResult]:
        """Undo every rewrite from the most recent session."""
        sessions = self.sessions()
        if not sessions:
            return []
        return [self._restore(entry) for entry in read_manifest(sessions[0])]

    def _restore(self, entry: UndoEntry) -> WriteResult:
        if not entry.backup.exists():
            return WriteResult(
                success=False,
                message=f"Backup file not found for {entry.file}",
                file=entry.file,
            )
        entry.file.write_bytes(entry.backup.read_bytes())
        return WriteResult(success=True, message=f"Restored {entry.file}", file=entry.file)

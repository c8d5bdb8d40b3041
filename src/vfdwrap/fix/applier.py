"""Writes transformed files back to disk with backup support."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from vfdwrap.core.config import get_state_dir
from vfdwrap.core.models import WriteResult
from vfdwrap.fix.rewriter import transform_result
from vfdwrap.fix.undo import UndoEntry, append_manifest, read_manifest

logger = logging.getLogger("vfdwrap.fix")


class TransformApplier:
    """Applies the toNative rewrite to files in place."""

    def __init__(
        self,
        project_path: Path,
        predicate: Callable[[str], bool] | None = None,
        backup: bool = True,
    ):
        self.project_path = project_path
        self.predicate = predicate
        self.backup = backup
        self.state_dir = get_state_dir(project_path)
        self.backup_dir = self.state_dir / "backups"
        self._session = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")

    def apply(self, file: Path) -> WriteResult:
        """Rewrite a single file if it holds a class-style component."""
        file_path = self._resolve_file(file)

        if not file_path.exists():
            return WriteResult(
                success=False,
                message=f"File not found: {file}",
                file=file,
            )

        try:
            raw = file_path.read_bytes()
            content = raw.decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping unreadable file %s: %s", file, exc)
            return WriteResult(success=False, message=f"Unreadable file: {file}", file=file)

        result = transform_result(content, self.predicate)

        if not result.changed:
            return WriteResult(
                success=False,
                message="No changes applied: not a class-style component.",
                file=file,
            )

        if self.backup:
            self._create_backup(file_path, raw)

        file_path.write_text(result.code, encoding="utf-8")
        logger.info("Wrapped %s with toNative (%d replacement(s))", file, result.replacements)

        return WriteResult(
            success=True,
            message=f"Wrapped default export with toNative ({result.replacements} replacement(s))",
            file=file,
            replacements=result.replacements,
        )

    def apply_all(self, files: list[Path]) -> list[WriteResult]:
        return [self.apply(f) for f in files]

    def _resolve_file(self, file: Path) -> Path:
        """Resolve a possibly relative file path."""
        if file.is_absolute():
            return file
        return self.project_path / file

    def _create_backup(self, file_path: Path, raw: bytes) -> None:
        """Copy the original bytes into this run's session and record them."""
        session_dir = self.backup_dir / self._session
        session_dir.mkdir(parents=True, exist_ok=True)

        # Numbered by write order so two files with one name never collide.
        index = len(read_manifest(session_dir))
        backup_file = session_dir / f"{index:03d}-{file_path.name}.bak"
        backup_file.write_bytes(raw)

        append_manifest(
            session_dir,
            UndoEntry(file=file_path, backup=backup_file, timestamp=self._session),
        )

"""Scanner engine — classifies every component file under a target."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from vfdwrap.core.config import VfdConfig, load_config
from vfdwrap.core.models import FileVerdict, ScanReport
from vfdwrap.scanner.preflight import passes_preflight
from vfdwrap.scanner.scoring import compute_confidence

logger = logging.getLogger("vfdwrap.scanner")


class Scanner:
    """Runs the preflight filter and the classifier over a codebase."""

    def __init__(
        self,
        project_path: Path | None = None,
        config: VfdConfig | None = None,
    ):
        self.project_path = (project_path or Path.cwd()).resolve()
        self.config = config or load_config(self.project_path)
        self.test = re.compile(self.config.scan.test)

    def scan(self, target_path: Path | None = None) -> ScanReport:
        """Classify all matching files and produce a scan report."""
        scan_path = target_path or self.project_path
        report = ScanReport(project_name=self.project_path.name)

        for file_path in self.collect_files(scan_path):
            try:
                source = file_path.read_text(encoding="utf-8", errors="ignore")
            except OSError as exc:
                logger.warning("Skipping unreadable file %s: %s", file_path, exc)
                report.skipped.append(file_path)
                continue

            report.verdicts.append(self.classify(file_path, source))

        return report

    def classify(self, file_path: Path, source: str) -> FileVerdict:
        """Classify a single file's text."""
        display = file_path
        try:
            display = file_path.resolve().relative_to(self.project_path)
        except ValueError:
            pass  # outside the project root; keep as-is

        return FileVerdict(
            file=display,
            passes_preflight=passes_preflight(source),
            report=compute_confidence(source),
        )

    def collect_files(self, path: Path) -> list[Path]:
        """Collect matching files, excluding configured patterns."""
        if path.is_file():
            return [path] if self.test.search(path.name) else []

        files: list[Path] = []
        for candidate in path.rglob("*"):
            if not candidate.is_file() or not self.test.search(candidate.name):
                continue
            rel = candidate.relative_to(path).as_posix()
            if any(excl.rstrip("/") in rel for excl in self.config.exclude):
                continue
            files.append(candidate)

        return sorted(files)

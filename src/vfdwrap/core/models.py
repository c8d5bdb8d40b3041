"""Shared data models used across vfdwrap modules."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

# Minimum score a file must exceed to count as a class-style component.
THRESHOLD = 50


class Rule(enum.Enum):
    LIBRARY_IMPORT = "library_import"
    VUE_SUBCLASS = "vue_subclass"
    ANY_SUBCLASS = "any_subclass"
    NON_OBJECT_DEFAULT_EXPORT = "non_object_default_export"
    LOWERCASE_DEFAULT_EXPORT = "lowercase_default_export"


@dataclass
class RuleHit:
    """A single classifier rule that matched the source text."""

    rule: Rule
    weight: int
    snippet: str = ""


@dataclass
class ConfidenceReport:
    """Outcome of scoring one source text."""

    score: int = 0
    hits: list[RuleHit] = field(default_factory=list)
    early_exit: bool = False

    @property
    def is_class_component(self) -> bool:
        return self.score > THRESHOLD

    @property
    def rules(self) -> list[Rule]:
        return [h.rule for h in self.hits]


@dataclass
class TransformResult:
    """Result of rewriting one source text."""

    code: str
    changed: bool
    replacements: int = 0


@dataclass
class FileVerdict:
    """Classification of a single file found by the scanner."""

    file: Path
    passes_preflight: bool
    report: ConfidenceReport

    @property
    def is_class_component(self) -> bool:
        return self.passes_preflight and self.report.is_class_component


@dataclass
class ScanReport:
    """Classification summary for every matching file under a target."""

    verdicts: list[FileVerdict] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    scanned_at: datetime = field(default_factory=datetime.now)
    project_name: str = ""

    @property
    def total_files(self) -> int:
        return len(self.verdicts)

    @property
    def class_component_count(self) -> int:
        return sum(1 for v in self.verdicts if v.is_class_component)

    @property
    def preflight_rejected_count(self) -> int:
        return sum(1 for v in self.verdicts if not v.passes_preflight)


@dataclass
class WriteResult:
    """Result of writing a transformed file back to disk."""

    success: bool
    message: str
    file: Path | None = None
    replacements: int = 0
    applied_at: datetime = field(default_factory=datetime.now)

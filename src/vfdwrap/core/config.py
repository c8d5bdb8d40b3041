"""Configuration management for vfdwrap (vfdwrap.toml parsing + defaults)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

try:
    import tomllib
except ImportError:
    try:
        import tomli as tomllib  # type: ignore[no-redef]
    except ImportError:
        tomllib = None  # type: ignore[assignment]

CONFIG_FILE = "vfdwrap.toml"
STATE_DIR = ".vfdwrap"


@dataclass
class ScanConfig:
    # Regex matched against file names; mirrors the host plugin's `test`.
    test: str = r"\.vue$"
    verbose: bool = False


@dataclass
class WriteConfig:
    backup_before_write: bool = True


@dataclass
class VfdConfig:
    """Complete vfdwrap configuration."""

    exclude: list[str] = field(
        default_factory=lambda: [
            "node_modules/",
            "dist/",
            ".git/",
            ".vfdwrap/",
        ]
    )
    scan: ScanConfig = field(default_factory=ScanConfig)
    write: WriteConfig = field(default_factory=WriteConfig)


def load_config(project_path: Path | None = None) -> VfdConfig:
    """Load configuration from vfdwrap.toml if present, otherwise return defaults."""
    config = VfdConfig()

    if project_path is None:
        project_path = Path.cwd()

    config_file = project_path / CONFIG_FILE
    if not config_file.exists():
        return config

    if tomllib is None:
        return config

    with open(config_file, "rb") as f:
        data = tomllib.load(f)

    if "general" in data:
        gen = data["general"]
        if "exclude" in gen:
            config.exclude = gen["exclude"]

    if "scan" in data:
        s = data["scan"]
        for attr in ("test", "verbose"):
            if attr in s:
                setattr(config.scan, attr, s[attr])

    if "write" in data:
        w = data["write"]
        if "backup_before_write" in w:
            config.write.backup_before_write = w["backup_before_write"]

    return config


def get_state_dir(project_path: Path | None = None) -> Path:
    """Get or create the .vfdwrap directory."""
    if project_path is None:
        project_path = Path.cwd()
    state_dir = project_path / STATE_DIR
    state_dir.mkdir(exist_ok=True)
    return state_dir


def ensure_gitignore(project_path: Path | None = None) -> bool:
    """Ignore the state directory in .gitignore. Returns True if a line was added."""
    gitignore = (project_path or Path.cwd()) / ".gitignore"
    lines = gitignore.read_text().splitlines() if gitignore.exists() else []

    if any(line.strip().rstrip("/") == STATE_DIR for line in lines):
        return False

    lines.append(f"{STATE_DIR}/")
    gitignore.write_text("\n".join(lines) + "\n")
    return True

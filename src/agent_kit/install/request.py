"""Install request and report data types."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from agent_kit.sync.policy import MODE_SKIP

MODE_INTERACTIVE = "interactive"
MODE_AUTO = "auto"


@dataclass(frozen=True)
class InstallRequest:
    """What to install and where."""

    categories: frozenset[str]
    destination: Path
    mode: str = MODE_INTERACTIVE
    include_standalone: bool = False
    on_conflict: str = MODE_SKIP
    dry_run: bool = False

    @property
    def auto(self) -> bool:
        return self.mode == MODE_AUTO


@dataclass
class InstallReport:
    """Folded outcome of one install run."""

    destination: Path
    copied: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    categories_installed: list[str] = field(default_factory=list)
    auto_skipped: bool = False
    dry_run: bool = False

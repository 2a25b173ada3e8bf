"""Auto-install guard for unattended installs (e.g. postinstall hooks)."""

from __future__ import annotations

from pathlib import Path

from agent_kit.categories import AUTO_INSTALL_MARKERS, dest_subdir
from agent_kit.paths import config_root


def marker_paths(destination_root: Path | str) -> list[Path]:
    """Destination directories whose presence signals a previous install."""
    root = config_root(destination_root)
    return [root / dest_subdir(name) for name in AUTO_INSTALL_MARKERS]


def should_auto_install(destination_root: Path | str) -> bool:
    """Return True only when none of the marker directories exist.

    Explicit installs do not consult this; they rely on per-file skipping.
    """
    return not any(p.exists() for p in marker_paths(destination_root))

"""Category installer: one tree sync per requested content category."""

from __future__ import annotations

import shutil
from collections.abc import Callable, Iterable
from pathlib import Path

from agent_kit.categories import dest_subdir, ordered, source_subdir
from agent_kit.paths import PLACEHOLDER_NAMES, STANDALONE_DOCUMENT, standalone_source
from agent_kit.sync.policy import MODE_SKIP
from agent_kit.sync.tree import SyncResult, synchronize


def has_installable_content(source_dir: Path) -> bool:
    """False when the directory is missing or holds only placeholders."""
    if not source_dir.is_dir():
        return False
    return any(p.name not in PLACEHOLDER_NAMES for p in source_dir.iterdir())


def install_category(
    name: str,
    content_root: Path | str,
    config_root: Path | str,
    on_conflict: str = MODE_SKIP,
    dry_run: bool = False,
) -> SyncResult:
    """Sync one category subtree into <config_root>/<category>.

    Categories without installable content are skipped entirely; their
    destination subtree is not created.
    """
    src = Path(content_root) / source_subdir(name)
    if not has_installable_content(src):
        return SyncResult()
    dest = Path(config_root) / dest_subdir(name)
    return synchronize(src, dest, on_conflict=on_conflict, dry_run=dry_run)


def install_categories(
    names: Iterable[str],
    content_root: Path | str,
    config_root: Path | str,
    on_conflict: str = MODE_SKIP,
    dry_run: bool = False,
    on_start: Callable[[str], None] | None = None,
) -> tuple[SyncResult, list[str]]:
    """Install several categories in canonical order.

    Args:
        names: Category names to install.
        content_root: Root of the shipped content.
        config_root: Destination <project>/.github directory.
        on_conflict: Conflict mode passed to the synchronizer.
        dry_run: Compute results without writing.
        on_start: Called with the category name before each category
            that has content to install.

    Returns:
        (aggregated result, names of categories that had content).
    """
    total = SyncResult()
    installed: list[str] = []
    for name in ordered(names):
        if not has_installable_content(Path(content_root) / source_subdir(name)):
            continue
        if on_start:
            on_start(name)
        total.extend(install_category(name, content_root, config_root, on_conflict, dry_run))
        installed.append(name)
    return total, installed


def install_standalone_document(
    content_root: Path | str,
    config_root: Path | str,
    dry_run: bool = False,
) -> SyncResult:
    """Copy copilot-instructions.md only if the destination has none.

    Never merged, whatever the conflict mode.
    """
    result = SyncResult()
    src = standalone_source(content_root)
    if not src.is_file():
        return result

    dest = Path(config_root) / STANDALONE_DOCUMENT
    if dest.exists():
        result.skipped.append(dest)
        return result

    if not dry_run:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dest)
    result.copied.append(dest)
    return result

"""List the content available for installation (read-only)."""

from __future__ import annotations

from pathlib import Path

from agent_kit.categories import CATEGORIES
from agent_kit.console import C, log


def list_category(content_root: Path | str, name: str) -> list[str]:
    """Names shown for one category.

    File-style categories list *.md files directly inside the subtree;
    skills list each skill directory as <name>/SKILL.md.
    """
    info = CATEGORIES[name]
    subtree = Path(content_root) / info["source"]
    if not subtree.is_dir():
        return []

    if info["listing"] == "dirs":
        return [f"{p.name}/SKILL.md" for p in sorted(subtree.iterdir()) if p.is_dir()]
    return [p.name for p in sorted(subtree.iterdir()) if p.is_file() and p.suffix == ".md"]


def list_available(content_root: Path | str) -> dict[str, list[str]]:
    """Map every category name → listing, in canonical order."""
    return {name: list_category(content_root, name) for name in CATEGORIES}


def render_catalog(content_root: Path | str) -> None:
    log("\nAvailable content:\n", C.BLUE)
    for i, (name, entries) in enumerate(list_available(content_root).items()):
        prefix = "\n" if i else ""
        log(f"{prefix}{CATEGORIES[name]['label']}:", C.GREEN)
        if not entries:
            log("  (empty)", C.DIM)
        for entry in entries:
            log(f"  • {entry}", C.DIM)
    print()

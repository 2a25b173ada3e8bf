"""Conflict policy: decide what happens to one destination file."""

from __future__ import annotations

from pathlib import Path

COPY_NEW = "copy-new"
SKIP = "skip"
MERGE = "merge"
OVERWRITE = "overwrite"

# onConflict modes
MODE_SKIP = "skip"
MODE_MERGE = "merge"

CONFLICT_MODES = (MODE_SKIP, MODE_MERGE)

MERGE_SEPARATOR = b"\n\n"


def is_markdown(path: Path | str) -> bool:
    """True for .md documents, the only files eligible for merging."""
    return Path(path).suffix == ".md"


def check_mode(mode: str) -> str:
    """Return mode unchanged, or raise ValueError if it is not a known mode."""
    if mode not in CONFLICT_MODES:
        raise ValueError(
            f"Unknown conflict mode '{mode}'. Valid: {', '.join(CONFLICT_MODES)}"
        )
    return mode


def decide(
    destination_exists: bool,
    source_is_markdown: bool,
    destination_bytes: bytes | None = None,
    incoming_bytes: bytes | None = None,
    mode: str = MODE_SKIP,
) -> str:
    """Pick the disposition for a single file.

    Args:
        destination_exists: Whether the destination file is already there.
        source_is_markdown: Whether the file is a markdown document.
        destination_bytes: Current destination content. Only consulted
            in merge mode for markdown files.
        incoming_bytes: Source content. Same as above.
        mode: "skip" (default) or "merge".

    Returns:
        One of COPY_NEW, SKIP, MERGE.
    """
    check_mode(mode)

    if not destination_exists:
        return COPY_NEW

    if mode == MODE_SKIP:
        return SKIP

    if not source_is_markdown:
        return SKIP

    # Substring containment, not a diff: whitespace-only differences re-merge
    if (incoming_bytes or b"") in (destination_bytes or b""):
        return SKIP
    return MERGE


def merged_content(destination_bytes: bytes, incoming_bytes: bytes) -> bytes:
    """New destination content for a MERGE disposition."""
    return destination_bytes + MERGE_SEPARATOR + incoming_bytes

"""Mirror a source directory into a destination.

The walk:
1. Return an empty result if the source root does not exist
2. Create the destination root (and ancestors)
3. For each entry under the source root, in name order:
   - directories recurse into the matching destination subdirectory
   - files consult the conflict policy and are copied, merged or skipped

Nothing is ever deleted. Filesystem errors propagate to the caller.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from agent_kit.sync.policy import (
    COPY_NEW,
    MERGE,
    MODE_MERGE,
    MODE_SKIP,
    OVERWRITE,
    SKIP,
    check_mode,
    decide,
    is_markdown,
    merged_content,
)


@dataclass
class SyncResult:
    """Destination paths written and left alone during one run."""

    copied: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    def extend(self, other: SyncResult) -> None:
        self.copied.extend(other.copied)
        self.skipped.extend(other.skipped)

    @property
    def total(self) -> int:
        return len(self.copied) + len(self.skipped)

    def is_empty(self) -> bool:
        return self.total == 0


def synchronize(
    source_root: Path | str,
    destination_root: Path | str,
    on_conflict: str = MODE_SKIP,
    dry_run: bool = False,
) -> SyncResult:
    """Copy every file under source_root into destination_root.

    Args:
        source_root: Read-only directory to mirror.
        destination_root: Directory to populate. Created if missing.
        on_conflict: "skip" keeps existing files, "merge" appends new
            markdown content to existing markdown files.
        dry_run: Compute the result without touching the destination.

    Returns:
        SyncResult with copied (including merged) and skipped paths.
    """
    check_mode(on_conflict)
    src = Path(source_root)
    dest = Path(destination_root)
    result = SyncResult()

    if not src.exists():
        return result

    if not dry_run:
        dest.mkdir(parents=True, exist_ok=True)

    for entry in sorted(src.iterdir(), key=lambda p: p.name):
        target = dest / entry.name
        if entry.is_dir():
            result.extend(synchronize(entry, target, on_conflict, dry_run))
            continue

        action = _sync_file(entry, target, on_conflict, dry_run)
        if action == SKIP:
            result.skipped.append(target)
        else:
            result.copied.append(target)

    return result


def _sync_file(source: Path, target: Path, on_conflict: str, dry_run: bool) -> str:
    """Apply the policy to one file and return the disposition taken."""
    exists = target.exists()
    markdown = is_markdown(source)

    # A directory or other non-file at the target is never read or replaced
    if exists and not target.is_file():
        return SKIP

    existing = incoming = None
    if exists and markdown and on_conflict == MODE_MERGE:
        existing = target.read_bytes()
        incoming = source.read_bytes()

    action = decide(exists, markdown, existing, incoming, mode=on_conflict)

    if dry_run or action == SKIP:
        return action

    if action in (COPY_NEW, OVERWRITE):
        shutil.copyfile(source, target)
    elif action == MERGE:
        target.write_bytes(merged_content(existing, incoming))
    return action

"""Sync module — mirror a content subtree into a destination, never clobbering.

Each destination file ends up with one disposition:
    copy-new   destination was absent, source bytes copied
    skip       destination present and kept as-is
    merge      destination present, incoming markdown appended
    overwrite  destination replaced (representable, not used by default)
"""

from agent_kit.sync.policy import (
    COPY_NEW,
    MERGE,
    MODE_MERGE,
    MODE_SKIP,
    OVERWRITE,
    SKIP,
    decide,
)
from agent_kit.sync.tree import SyncResult, synchronize

__all__ = [
    "COPY_NEW",
    "MERGE",
    "MODE_MERGE",
    "MODE_SKIP",
    "OVERWRITE",
    "SKIP",
    "decide",
    "SyncResult",
    "synchronize",
]

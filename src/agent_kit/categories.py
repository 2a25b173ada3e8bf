"""Canonical content category definitions — single source of truth.

All category name/subtree/flag mappings live here.
No other module should define its own category mapping dicts.
"""

from __future__ import annotations

# Each category: name → metadata dict. Dict order is install order.
#   source: subtree under the content root
#   dest:   subtree under <dest>/.github
#   flag/short: CLI selectors
#   listing: "files" lists *.md directly inside, "dirs" lists skill folders
CATEGORIES: dict[str, dict[str, str]] = {
    "agents":       {"source": "agents",       "dest": "agents",       "flag": "--agents",       "short": "-a", "listing": "files", "label": "Agents"},
    "skills":       {"source": "skills",       "dest": "skills",       "flag": "--skills",       "short": "-s", "listing": "dirs",  "label": "Skills"},
    "prompts":      {"source": "prompts",      "dest": "prompts",      "flag": "--prompts",      "short": "-p", "listing": "files", "label": "Prompts"},
    "instructions": {"source": "instructions", "dest": "instructions", "flag": "--instructions", "short": "-i", "listing": "files", "label": "Instructions"},
}

# Destination subtrees whose presence means a previous install happened.
# Only agents and skills are consulted.
AUTO_INSTALL_MARKERS: tuple[str, ...] = ("agents", "skills")


def category_names() -> list[str]:
    """All category names in canonical install order."""
    return list(CATEGORIES)


def source_subdir(name: str) -> str:
    """Map a category name → subtree under the content root."""
    return _lookup(name)["source"]


def dest_subdir(name: str) -> str:
    """Map a category name → subtree under the destination config root."""
    return _lookup(name)["dest"]


def ordered(names) -> list[str]:
    """Return the given category names in canonical order.

    Raises:
        ValueError: If any name is not a known category.
    """
    wanted = set(names)
    unknown = wanted - set(CATEGORIES)
    if unknown:
        raise ValueError(
            f"Unknown category: {', '.join(sorted(unknown))}. "
            f"Valid: {', '.join(CATEGORIES)}"
        )
    return [name for name in CATEGORIES if name in wanted]


def _lookup(name: str) -> dict[str, str]:
    info = CATEGORIES.get(name)
    if info is None:
        raise ValueError(f"Unknown category: {name}. Valid: {', '.join(CATEGORIES)}")
    return info

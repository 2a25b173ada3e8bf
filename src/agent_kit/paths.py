"""Content and destination path resolution.

Resolves the read-only content root shipped with the tool and the
consumer-side config root. Uses environment variables when available,
falls back to conventional defaults.

Environment variables:
    AGENT_KIT_CONTENT_DIR — content root (default: <package>/content)
    AGENT_KIT_DEST — destination project root (default: current directory)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_CONTENT_DIR = Path(__file__).resolve().parent / "content"

# Directory under the destination project that receives all content
CONFIG_ROOT_NAME = ".github"

# Standalone document, shipped under <content>/.github/ and installed
# at <dest>/.github/
STANDALONE_DOCUMENT = "copilot-instructions.md"

PLACEHOLDER_NAMES = frozenset({".gitkeep"})


def content_root() -> Path:
    """Return the root directory of the shipped content."""
    env = os.environ.get("AGENT_KIT_CONTENT_DIR")
    if env:
        return Path(env).expanduser()
    return _DEFAULT_CONTENT_DIR


def default_destination() -> Path:
    """Return the destination project root when none is given explicitly."""
    env = os.environ.get("AGENT_KIT_DEST")
    if env:
        return Path(env).expanduser()
    return Path.cwd()


def config_root(destination: Path | str) -> Path:
    """Return <destination>/.github."""
    return Path(destination) / CONFIG_ROOT_NAME


def standalone_source(content: Path | str) -> Path:
    """Return the path to the shipped standalone document."""
    return Path(content) / CONFIG_ROOT_NAME / STANDALONE_DOCUMENT

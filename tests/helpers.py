"""Filesystem helpers shared by the test modules."""

from pathlib import Path


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


# Exactly 500 bytes
SKILL_BODY = "# Code Debugging\n\n" + "x" * 481 + "\n"

"""Shared test fixtures for agent-kit."""

import pytest

from helpers import SKILL_BODY, write


@pytest.fixture
def content_root(tmp_path):
    """A content root with every category plus the standalone document."""
    root = tmp_path / "content"
    write(root / "agents" / "reviewer.md", "# Reviewer\n\nReview code.\n")
    write(root / "agents" / "planner.md", "# Planner\n\nPlan work.\n")
    write(root / "skills" / "code-debugging" / "SKILL.md", SKILL_BODY)
    write(root / "prompts" / "write-tests.prompt.md", "Write tests.\n")
    write(root / "instructions" / "python.instructions.md", "Use type hints.\n")
    write(root / ".github" / "copilot-instructions.md", "# Copilot\n\nBe helpful.\n")
    return root

@pytest.fixture
def dest(tmp_path):
    root = tmp_path / "project"
    root.mkdir()
    return root

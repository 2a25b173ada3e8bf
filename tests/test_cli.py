"""Tests for the agent-kit CLI.

Covers:
- Parser construction and selector flags
- Listing mode
- Install, auto, merge, and dry-run modes end to end
- Destination and content resolution from the environment
"""

import argparse
from unittest.mock import patch

import pytest

from agent_kit.cli import build_parser, main
from agent_kit.cli.install import selected_categories
from helpers import write


def run_cli(*argv):
    with patch("sys.argv", ["agent-kit", *argv]):
        return main()


# ── Parser construction ──────────────────────────────────────────


class TestParser:
    def test_build_parser_returns_parser(self):
        assert isinstance(build_parser(), argparse.ArgumentParser)

    def test_help_exits_zero(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--help"])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("flag,name", [
        ("-a", "agents"),
        ("--skills", "skills"),
        ("-p", "prompts"),
        ("--instructions", "instructions"),
    ])
    def test_selector_flags(self, flag, name):
        args = build_parser().parse_args([flag])
        assert selected_categories(args) == [name]

    def test_short_dest_and_list(self):
        args = build_parser().parse_args(["-d", "/tmp/x", "-l"])
        assert args.dest == "/tmp/x"
        assert args.list is True

    def test_no_flags_selects_nothing_explicitly(self):
        args = build_parser().parse_args([])
        assert selected_categories(args) == []
        assert args.install_all is False


# ── Listing ──────────────────────────────────────────────────────


class TestList:
    def test_lists_without_installing(self, content_root, dest, capsys):
        rc = run_cli("--list", "--content-dir", str(content_root), "-d", str(dest))
        assert rc == 0
        out = capsys.readouterr().out
        assert "code-debugging/SKILL.md" in out
        assert not (dest / ".github").exists()


# ── Install ──────────────────────────────────────────────────────


class TestInstall:
    def test_default_installs_everything(self, content_root, dest, capsys):
        rc = run_cli("--content-dir", str(content_root), "--dest", str(dest))
        assert rc == 0
        github = dest / ".github"
        assert (github / "agents" / "planner.md").exists()
        assert (github / "skills" / "code-debugging" / "SKILL.md").exists()
        assert (github / "copilot-instructions.md").exists()
        assert "Installed 6 file(s)" in capsys.readouterr().out

    def test_single_category(self, content_root, dest):
        run_cli("--skills", "--content-dir", str(content_root), "-d", str(dest))
        github = dest / ".github"
        assert (github / "skills" / "code-debugging" / "SKILL.md").exists()
        assert not (github / "agents").exists()
        assert not (github / "copilot-instructions.md").exists()

    def test_rerun_reports_skips_and_succeeds(self, content_root, dest, capsys):
        run_cli("--content-dir", str(content_root), "-d", str(dest))
        capsys.readouterr()
        rc = run_cli("--content-dir", str(content_root), "-d", str(dest))
        assert rc == 0
        out = capsys.readouterr().out
        assert "Skipped 6 existing file(s)" in out
        assert "Installed" not in out

    def test_auto_skips_when_installed(self, content_root, dest, capsys):
        (dest / ".github" / "skills").mkdir(parents=True)
        rc = run_cli("--auto", "--content-dir", str(content_root), "-d", str(dest))
        assert rc == 0
        assert "skipping auto-install" in capsys.readouterr().out
        assert not (dest / ".github" / "agents").exists()

    def test_merge_flag(self, content_root, dest):
        target = write(dest / ".github" / "agents" / "reviewer.md", "Team notes.")
        run_cli("--agents", "--merge", "--content-dir", str(content_root), "-d", str(dest))
        assert target.read_text() == "Team notes.\n\n# Reviewer\n\nReview code.\n"

    def test_unknown_switch_is_ignored(self, content_root, dest):
        rc = run_cli("--auto", "--verbose", "--content-dir", str(content_root), "-d", str(dest))
        assert rc == 0
        assert (dest / ".github" / "skills" / "code-debugging" / "SKILL.md").exists()

    def test_dest_without_value_uses_environment(self, content_root, dest, monkeypatch):
        monkeypatch.setenv("AGENT_KIT_DEST", str(dest))
        rc = run_cli("--prompts", "--content-dir", str(content_root), "--dest")
        assert rc == 0
        assert (dest / ".github" / "prompts" / "write-tests.prompt.md").exists()

    def test_dry_run(self, content_root, dest, capsys):
        rc = run_cli("--dry-run", "--content-dir", str(content_root), "-d", str(dest))
        assert rc == 0
        assert not (dest / ".github").exists()
        assert "DRY RUN" in capsys.readouterr().out


# ── Project config and environment ───────────────────────────────


class TestConfigAndEnvironment:
    def test_project_config_selects_categories(self, content_root, dest):
        write(dest / "agent-kit.yaml", "categories: [prompts]\n")
        run_cli("--content-dir", str(content_root), "-d", str(dest))
        github = dest / ".github"
        assert (github / "prompts" / "write-tests.prompt.md").exists()
        assert not (github / "agents").exists()

    def test_flags_override_project_config(self, content_root, dest):
        write(dest / "agent-kit.yaml", "categories: [prompts]\n")
        run_cli("--agents", "--content-dir", str(content_root), "-d", str(dest))
        github = dest / ".github"
        assert (github / "agents" / "planner.md").exists()
        assert not (github / "prompts").exists()

    def test_invalid_project_config_exits_one(self, content_root, dest, capsys):
        write(dest / "agent-kit.yaml", "on_conflict: clobber\n")
        rc = run_cli("--content-dir", str(content_root), "-d", str(dest))
        assert rc == 1
        assert "Invalid project config" in capsys.readouterr().err
        assert not (dest / ".github").exists()

    def test_environment_destination_and_content(self, content_root, dest, monkeypatch):
        monkeypatch.setenv("AGENT_KIT_DEST", str(dest))
        monkeypatch.setenv("AGENT_KIT_CONTENT_DIR", str(content_root))
        rc = run_cli("--instructions")
        assert rc == 0
        assert (dest / ".github" / "instructions" / "python.instructions.md").exists()

    def test_bundled_content_lists(self, capsys, monkeypatch):
        monkeypatch.delenv("AGENT_KIT_CONTENT_DIR", raising=False)
        rc = run_cli("--list")
        assert rc == 0
        out = capsys.readouterr().out
        assert "code-debugging/SKILL.md" in out
        assert "code-reviewer.md" in out

"""Install orchestration: request in, report out.

The orchestrator:
1. Applies the auto-install guard (auto mode only)
2. Ensures <dest>/.github exists
3. Installs each requested category, then the standalone document
4. Folds everything into one InstallReport

It makes no per-file decisions; those belong to the conflict policy.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from agent_kit.categories import category_names, ordered
from agent_kit.console import C, log
from agent_kit.install.guard import should_auto_install
from agent_kit.install.installer import install_categories, install_standalone_document
from agent_kit.install.request import (
    MODE_AUTO,
    MODE_INTERACTIVE,
    InstallReport,
    InstallRequest,
)
from agent_kit.paths import STANDALONE_DOCUMENT, config_root
from agent_kit.sync.policy import MODE_SKIP, check_mode


def build_request(
    destination: Path | str,
    categories: Iterable[str] = (),
    install_all: bool = False,
    auto: bool = False,
    on_conflict: str = MODE_SKIP,
    dry_run: bool = False,
) -> InstallRequest:
    """Turn selector flags into an InstallRequest.

    With no specific category selected, everything is installed,
    including the standalone document.
    """
    selected = ordered(categories)
    if not selected:
        install_all = True
    if install_all:
        selected = category_names()
    return InstallRequest(
        categories=frozenset(selected),
        destination=Path(destination),
        mode=MODE_AUTO if auto else MODE_INTERACTIVE,
        include_standalone=install_all,
        on_conflict=check_mode(on_conflict),
        dry_run=dry_run,
    )


def run_install(
    request: InstallRequest,
    content_root: Path | str,
    verbose: bool = True,
) -> InstallReport:
    """Execute an install request against the given content root."""
    report = InstallReport(destination=request.destination, dry_run=request.dry_run)

    if request.auto and not should_auto_install(request.destination):
        report.auto_skipped = True
        return report

    if verbose:
        log("\nInstalling agent-kit...\n", C.BLUE)

    github_dir = config_root(request.destination)
    if not request.dry_run:
        github_dir.mkdir(parents=True, exist_ok=True)

    def _announce(name: str) -> None:
        if verbose:
            log(f"Installing {name}...", C.YELLOW)

    result, installed = install_categories(
        request.categories,
        content_root,
        github_dir,
        on_conflict=request.on_conflict,
        dry_run=request.dry_run,
        on_start=_announce,
    )
    report.copied.extend(result.copied)
    report.skipped.extend(result.skipped)
    report.categories_installed.extend(installed)

    if request.include_standalone:
        doc = install_standalone_document(content_root, github_dir, dry_run=request.dry_run)
        if doc.copied:
            _announce(STANDALONE_DOCUMENT)
        report.copied.extend(doc.copied)
        report.skipped.extend(doc.skipped)

    return report


def render_report(report: InstallReport) -> None:
    """Print the human-readable summary of an install run."""
    if report.auto_skipped:
        log("agent-kit: Content already exists, skipping auto-install.", C.DIM)
        log('Run "agent-kit --help" to see manual installation options.\n', C.DIM)
        return

    print()
    verb = "Would install" if report.dry_run else "Installed"
    if report.copied:
        log(f"{verb} {len(report.copied)} file(s):", C.GREEN)
        for path in report.copied:
            log(f"   {_relative(path, report.destination)}", C.DIM)

    if report.skipped:
        log(f"Skipped {len(report.skipped)} existing file(s)", C.YELLOW)

    if report.dry_run:
        log("\n[DRY RUN] No files were modified.\n", C.DIM)
    else:
        log("\nDone! Your agent-kit is ready.\n", C.GREEN)


def _relative(path: Path, root: Path) -> str:
    return os.path.relpath(path, root)

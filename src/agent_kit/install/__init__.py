"""Install module — category installs, auto-install guard, orchestration."""

from agent_kit.install.guard import should_auto_install
from agent_kit.install.installer import (
    has_installable_content,
    install_categories,
    install_category,
    install_standalone_document,
)
from agent_kit.install.orchestrator import build_request, render_report, run_install
from agent_kit.install.request import InstallReport, InstallRequest

__all__ = [
    "should_auto_install",
    "has_installable_content",
    "install_categories",
    "install_category",
    "install_standalone_document",
    "build_request",
    "render_report",
    "run_install",
    "InstallReport",
    "InstallRequest",
]

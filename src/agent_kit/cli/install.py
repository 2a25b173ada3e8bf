"""Install CLI command."""

import argparse

import yaml

from agent_kit.categories import CATEGORIES
from agent_kit.console import error
from agent_kit.sync.policy import MODE_MERGE, MODE_SKIP


def selected_categories(args: argparse.Namespace) -> list[str]:
    """Category names whose selector flag was given."""
    return [name for name in CATEGORIES if getattr(args, name, False)]


def cmd_install(args: argparse.Namespace) -> int:
    from agent_kit.config import load_project_config
    from agent_kit.install.orchestrator import build_request, render_report, run_install

    try:
        config = load_project_config(args.dest)
    except (ValueError, yaml.YAMLError) as e:
        error(f"Invalid project config: {e}")
        return 1

    categories = selected_categories(args)
    install_all = args.install_all
    if not categories and not install_all and config.get("categories"):
        categories = config["categories"]

    on_conflict = MODE_MERGE if args.merge else config.get("on_conflict", MODE_SKIP)

    request = build_request(
        args.dest,
        categories=categories,
        install_all=install_all,
        auto=args.auto,
        on_conflict=on_conflict,
        dry_run=args.dry_run,
    )
    report = run_install(request, args.content_dir)
    render_report(report)
    return 0

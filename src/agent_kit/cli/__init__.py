"""Command-line entry point for agent-kit.

Usage:
    agent-kit                         Install everything into ./.github/
    agent-kit --agents --skills       Install agents and skills only
    agent-kit --prompts               Install only prompts
    agent-kit -d ./my-project         Install into a specific project
    agent-kit --list                  List available content
    agent-kit --auto                  Postinstall mode: no-op if already installed
"""

import argparse
import sys
from pathlib import Path

from agent_kit.categories import CATEGORIES
from agent_kit.cli.install import cmd_install
from agent_kit.cli.listing import cmd_list
from agent_kit.paths import content_root, default_destination

EPILOG = """\
examples:
  agent-kit                     # Install all to .github/
  agent-kit --agents --skills   # Install agents and skills only
  agent-kit --prompts           # Install only prompts
  agent-kit -d ./my-project     # Install to specific directory
"""


def _resolve_destination(args: argparse.Namespace) -> Path:
    """Resolve destination root from args or environment, once."""
    raw = getattr(args, "dest", None)
    if raw:
        return Path(raw).expanduser().resolve()
    return default_destination().resolve()


def _resolve_content(args: argparse.Namespace) -> Path:
    raw = getattr(args, "content_dir", None)
    if raw:
        return Path(raw).expanduser().resolve()
    return content_root()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agent-kit",
        description="Install AI agent definitions, skills, prompts, and instructions",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    for name, info in CATEGORIES.items():
        parser.add_argument(
            info["flag"], info["short"], dest=name, action="store_true",
            help=f"Install {info['label'].lower()}",
        )
    parser.add_argument(
        "--all", dest="install_all", action="store_true",
        help="Install everything (default)",
    )
    parser.add_argument(
        "--list", "-l", action="store_true",
        help="List available content",
    )
    parser.add_argument(
        "--dest", "-d", nargs="?", default=None,
        help="Destination directory (default: $AGENT_KIT_DEST or current directory)",
    )
    parser.add_argument(
        "--auto", action="store_true",
        help="Unattended mode: install only if nothing was installed before",
    )
    parser.add_argument(
        "--merge", action="store_true",
        help="Append new markdown content to existing files instead of skipping",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Preview changes without writing",
    )
    parser.add_argument(
        "--content-dir", nargs="?", default=None,
        help="Content root to install from (default: $AGENT_KIT_CONTENT_DIR or bundled content)",
    )
    return parser


def main() -> int:
    parser = build_parser()
    # Unrecognized switches are ignored, as postinstall hooks may pass extras
    args, _unknown = parser.parse_known_args()
    args.dest = str(_resolve_destination(args))
    args.content_dir = str(_resolve_content(args))

    if args.list:
        return cmd_list(args)
    return cmd_install(args)


if __name__ == "__main__":
    sys.exit(main())

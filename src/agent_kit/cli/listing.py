"""Listing CLI command."""

import argparse


def cmd_list(args: argparse.Namespace) -> int:
    from agent_kit.catalog import render_catalog

    render_catalog(args.content_dir)
    return 0

"""Parse and validate an optional agent-kit.yaml project file.

Lives at the destination project root:

    categories: [agents, skills]
    on_conflict: merge

Both keys are optional. Command-line selectors override the file.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from agent_kit.categories import ordered
from agent_kit.sync.policy import check_mode

CONFIG_FILENAME = "agent-kit.yaml"

KNOWN_KEYS = {"categories", "on_conflict"}


def config_path(destination: Path | str) -> Path:
    return Path(destination) / CONFIG_FILENAME


def read_config(path: Path | str) -> dict:
    """Read and validate an agent-kit.yaml file.

    Args:
        path: Path to agent-kit.yaml.

    Returns:
        Validated config dict (only known keys).

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the content is not a mapping or has invalid values.
    """
    cfg_path = Path(path)
    with open(cfg_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{CONFIG_FILENAME} at {cfg_path} is not a YAML mapping")

    unknown = set(data) - KNOWN_KEYS
    if unknown:
        raise ValueError(f"{cfg_path}: unknown keys {', '.join(sorted(unknown))}")

    config: dict = {}
    if "categories" in data:
        cats = data["categories"]
        if isinstance(cats, str):
            cats = [cats]
        if not isinstance(cats, list):
            raise ValueError(f"{cfg_path}: 'categories' must be a list")
        config["categories"] = ordered(str(c) for c in cats)
    if "on_conflict" in data:
        config["on_conflict"] = check_mode(str(data["on_conflict"]))
    return config


def load_project_config(destination: Path | str) -> dict:
    """Return the project config for a destination, or {} if it has none."""
    path = config_path(destination)
    if not path.is_file():
        return {}
    return read_config(path)

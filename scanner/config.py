"""Loading of splitting defaults from configuration files."""

import json
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


# Settings a config file may provide
CONFIG_KEYS = {"delimiter", "escape", "order", "format", "spans"}

# Name of the optional table holding the settings
CONFIG_SECTION = "escsplit"


def parse_config_file(file_path: Path) -> Optional[Any]:
    """
    Parse a TOML, YAML or JSON file and return its contents.

    Args:
        file_path: Path to the file to parse.

    Returns:
        Parsed data structure, or None if reading or parsing fails.
    """
    suffix = file_path.suffix.lower()

    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None

    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(content)

        elif suffix == ".json":
            return json.loads(content)

        elif suffix == ".toml":
            return tomllib.loads(content)

        else:
            # Try to parse as JSON first, then YAML
            try:
                return json.loads(content)
            except json.JSONDecodeError:
                return yaml.safe_load(content)

    except (ValueError, yaml.YAMLError):
        return None


def load_config(file_path: Path) -> Optional[Dict[str, Any]]:
    """
    Load splitting settings from a configuration file.

    The settings may sit at the top level or under an ``escsplit`` table.
    Unknown keys are dropped; values are validated by the caller.

    Args:
        file_path: Path to the config file.

    Returns:
        Mapping of known settings, or None if the file is unusable.
    """
    data = parse_config_file(file_path)
    if not isinstance(data, dict):
        return None

    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        return None

    return {key: value for key, value in section.items() if key in CONFIG_KEYS}

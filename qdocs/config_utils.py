#!/usr/bin/env python3
"""
config_utils.py - qdocs project configuration

Reads the optional qdocs.yaml at the project root:

    question_sets_dir: question_sets

Lookup order:
1. QDOCS_CONFIG environment variable (path to a YAML file)
2. <root>/qdocs.yaml
3. Built-in defaults
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from qdocs.errors import QDocsError


CONFIG_FILENAME = "qdocs.yaml"
CONFIG_ENV_VAR = "QDOCS_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "question_sets_dir": "question_sets",
}


class ConfigurationError(QDocsError):
    """Invalid or unreadable qdocs.yaml"""
    pass


def find_config_file(root: Optional[Path] = None) -> Optional[Path]:
    """Return the config file to use, or None when there is none."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        if not path.is_file():
            raise ConfigurationError(
                f"{CONFIG_ENV_VAR} points to a missing file: {path}"
            )
        return path

    root = Path(root) if root is not None else Path.cwd()
    path = root / CONFIG_FILENAME
    return path if path.is_file() else None


def load_config(root: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration merged over DEFAULTS.

    Raises:
        ConfigurationError: If the file cannot be parsed or has bad values
    """
    config = dict(DEFAULTS)
    path = find_config_file(root)
    if path is None:
        return config

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not read {path}: {e}") from e

    if data is None:
        return config
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping")

    for key, value in data.items():
        if key in DEFAULTS and not isinstance(value, str):
            raise ConfigurationError(f"{path}: '{key}' must be a string")
        config[key] = value

    return config


def get_question_sets_dir(root: Optional[Path] = None) -> Path:
    """Resolve the question set directory against the project root."""
    root = Path(root) if root is not None else Path.cwd()
    config = load_config(root)
    return root / config["question_sets_dir"]

"""
Configuration utility functions
"""

from pathlib import Path
from typing import Any

import yaml

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def resolve_config_path(filepath: str) -> Path:
    """
    Resolve a config path against the CWD, then the project root

    Args:
        filepath: Relative or absolute path

    Returns:
        First existing candidate, or the path as given
    """
    path = Path(filepath)
    if path.is_absolute() or path.exists():
        return path

    rooted = PROJECT_ROOT / path
    if rooted.exists():
        return rooted
    return path


def load_yaml(filepath: str) -> dict[str, Any]:
    """
    Load YAML file and return as dictionary

    Args:
        filepath: Path to YAML file (relative or absolute)

    Returns:
        Dictionary with YAML data (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file doesn't exist
        yaml.YAMLError: If YAML is invalid

    Example:
        >>> config = load_yaml("config/providers/cache.yaml")
        >>> print(config['redis']['port'])
        6379
    """
    path = resolve_config_path(filepath)

    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {filepath}")

    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_yaml_safe(filepath: str) -> dict[str, Any]:
    """
    Load YAML file with fallback to empty dict if missing or invalid
    """
    try:
        return load_yaml(filepath)
    except (FileNotFoundError, yaml.YAMLError):
        return {}

"""
Configuration Loader for Obsidian Vault Discovery

Reads the JSON documents Obsidian keeps in a vault's .obsidian/ folder, and
loads the YAML configuration of the vault scanner with user overrides.

Usage:
    from skills.config.scripts.config_loader import (
        get_string,
        load_scan_config,
        read_object,
    )

    # Read an Obsidian document (None if missing or corrupt)
    daily_notes = read_object(vault / ".obsidian" / "daily-notes.json")
    folder = get_string(daily_notes, "folder")

    # Load scanner limits with an optional override file
    config = load_scan_config(Path("~/.config/vaults.yaml").expanduser())
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Default scanner configuration embedded in script
DEFAULT_SCAN_CONFIG: dict[str, Any] = {
    "marker": ".obsidian",
    "max_depth": 5,
    "max_vaults": 25,
    "skip_dirs": [
        # macOS system and media folders
        "Library",
        "Applications",
        "Movies",
        "Pictures",
        "Music",
        # Build and dependency output
        "node_modules",
        "target",
        "dist",
        "build",
    ],
}

SKILL_CONFIG_FILE = Path(__file__).parent.parent / "config" / "default.yaml"


@dataclass
class ScanConfig:
    """Limits and pruning rules for the vault scanner."""

    marker: str = ".obsidian"
    max_depth: int = 5
    max_vaults: int = 25
    skip_dirs: list[str] = field(default_factory=list)


# =============================================================================
# Obsidian JSON Documents
# =============================================================================


def read_document(path: Path) -> Any | None:
    """
    Read and parse one JSON document.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed JSON value, or None if the file is missing, unreadable or invalid
    """
    # ValueError covers undecodable bytes and paths with embedded NULs
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, ValueError) as e:
        logger.debug(f"Cannot read {path}: {e}")
        return None

    try:
        return json.loads(raw)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Invalid JSON in {path}: {e}")
        return None


def read_object(path: Path) -> dict[str, Any] | None:
    """Read a JSON document that must be an object."""
    document = read_document(path)
    return document if isinstance(document, dict) else None


def get_string(document: Any, key: str) -> str | None:
    """
    Get a non-blank string value from a document.

    Args:
        document: Parsed document (anything other than a dict yields None)
        key: Top-level key

    Returns:
        Trimmed string, or None if missing, not a string or blank
    """
    if not isinstance(document, dict):
        return None
    value = document.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def get_object(document: Any, key: str) -> dict[str, Any] | None:
    """Get the nested object stored under key, if any."""
    if not isinstance(document, dict):
        return None
    value = document.get(key)
    return value if isinstance(value, dict) else None


def write_document(path: Path, data: dict[str, Any]) -> None:
    """
    Write a pretty-printed JSON document.

    Raises:
        OSError: If the file cannot be written
    """
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


# =============================================================================
# Scanner Configuration (YAML)
# =============================================================================


def load_scan_config(config_path: Path | None = None) -> ScanConfig:
    """
    Load scanner configuration with overrides.

    Lookup order:
    1. DEFAULT_SCAN_CONFIG (embedded fallback)
    2. skills/config/config/default.yaml (skill default)
    3. config_path (user override)

    Args:
        config_path: Optional YAML file with user overrides

    Returns:
        Validated ScanConfig

    Raises:
        ValueError: If the merged configuration is invalid
    """
    config = DEFAULT_SCAN_CONFIG.copy()

    for path in (SKILL_CONFIG_FILE, config_path):
        if path is None or not path.exists():
            continue
        try:
            with path.open("r", encoding="utf-8") as f:
                override = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            print(f"Warning: Failed to load config {path}: {e}", file=sys.stderr)
            continue
        if isinstance(override, dict):
            config = merge_configs(config, override)

    errors = validate_scan_config(config)
    if errors:
        raise ValueError("Invalid scan configuration: " + "; ".join(errors))

    return ScanConfig(
        marker=config["marker"],
        max_depth=config["max_depth"],
        max_vaults=config["max_vaults"],
        skip_dirs=list(config["skip_dirs"]),
    )


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two configuration dictionaries.

    Override values take precedence over base values.
    Nested dictionaries are merged recursively.
    Lists are replaced (not merged).

    Examples:
        >>> merge_configs({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 4}, "e": 5})
        {'a': 1, 'b': {'c': 4, 'd': 3}, 'e': 5}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def validate_scan_config(config: dict[str, Any]) -> list[str]:
    """
    Validate scanner configuration structure.

    Returns:
        List of validation errors (empty if valid)
    """
    errors: list[str] = []

    marker = config.get("marker")
    if not isinstance(marker, str) or not marker.strip():
        errors.append("'marker' must be a non-empty string")

    for key in ("max_depth", "max_vaults"):
        value = config.get(key)
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            errors.append(f"'{key}' must be a non-negative integer")

    skip_dirs = config.get("skip_dirs")
    if not isinstance(skip_dirs, list) or not all(isinstance(d, str) for d in skip_dirs):
        errors.append("'skip_dirs' must be a list of strings")

    return errors


def main() -> int:
    """CLI entry point for inspecting scanner configuration."""
    import argparse

    parser = argparse.ArgumentParser(description="Configuration Loader for Vault Discovery")
    parser.add_argument("--config", type=Path, help="YAML override file")
    parser.add_argument("--show", action="store_true", help="Show loaded configuration")

    args = parser.parse_args()

    try:
        config = load_scan_config(args.config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.show:
        print(yaml.safe_dump(asdict(config), default_flow_style=False, sort_keys=False))
    else:
        print("Configuration is valid")

    return 0


if __name__ == "__main__":
    sys.exit(main())

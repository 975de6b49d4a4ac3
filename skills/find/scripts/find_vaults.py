"""
Obsidian Vault Finder

Searches the home directory for Obsidian vaults: folders that directly
contain a .obsidian/ folder. The search is bounded in depth and result count
and prunes hidden, system and build folders.

Usage:
    # List vaults under the home directory
    obsidian-find-vaults

    # Search another root with a config override
    obsidian-find-vaults --home /data --config scan.yaml --json

    from skills.find.scripts.find_vaults import find_vaults
    vaults = find_vaults()
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

from skills.config.scripts.config_loader import ScanConfig, load_scan_config

logger = logging.getLogger(__name__)


class VaultScanError(Exception):
    """Raised when the search root cannot be determined."""


def resolve_home() -> Path:
    """
    Resolve the current user's home directory.

    Raises:
        VaultScanError: If no home directory can be determined
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise VaultScanError("Could not resolve home directory") from e


def should_skip(name: str, config: ScanConfig) -> bool:
    """Check if a directory should be pruned from the search."""
    if name.startswith(".") and name != config.marker:
        return True
    return name in config.skip_dirs


def find_vaults(home: Path | None = None, config: ScanConfig | None = None) -> list[str]:
    """
    Find Obsidian vaults below the home directory.

    A directory containing the marker folder is reported and not searched
    further. Unreadable directories and entries are skipped.

    Args:
        home: Search root (default: the user's home directory)
        config: Scanner limits (default: load_scan_config())

    Returns:
        Sorted, de-duplicated list of vault root paths

    Raises:
        VaultScanError: If home is not given and cannot be resolved
    """
    if home is None:
        home = resolve_home()
    if config is None:
        config = load_scan_config()

    vaults: list[str] = []
    visited: set[Path] = set()
    stack: list[tuple[Path, int]] = [(home, 0)]

    while stack and len(vaults) < config.max_vaults:
        directory, depth = stack.pop()
        if depth > config.max_depth or directory in visited:
            continue
        visited.add(directory)

        has_marker = False
        children: list[Path] = []

        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    try:
                        is_dir = entry.is_dir(follow_symlinks=False)
                    except OSError:
                        continue
                    if not is_dir:
                        continue
                    if entry.name == config.marker:
                        has_marker = True
                        break
                    if should_skip(entry.name, config):
                        continue
                    children.append(Path(entry.path))
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
            continue

        if has_marker:
            logger.debug(f"Found vault: {directory}")
            vaults.append(str(directory))
            continue

        if depth < config.max_depth:
            stack.extend((child, depth + 1) for child in children)

    return sorted(set(vaults))


def main() -> int:
    """CLI entry point for vault discovery."""
    import argparse

    parser = argparse.ArgumentParser(description="Find Obsidian vaults in the home directory")
    parser.add_argument("--home", type=Path, help="Search root (default: home directory)")
    parser.add_argument("--config", type=Path, help="YAML file overriding scan limits")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log skipped directories")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        vaults = find_vaults(args.home, load_scan_config(args.config))
    except (VaultScanError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(vaults, indent=2))
        return 0

    if not vaults:
        print("No Obsidian vaults found")
        return 0

    print(f"Found {len(vaults)} vault(s):")
    for vault in vaults:
        print(f"  {vault}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

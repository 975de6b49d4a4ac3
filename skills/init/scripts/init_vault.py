"""
Obsidian Vault Initializer

Turns a plain folder into an Obsidian vault: creates .obsidian/, the journal
folders, and seed settings so Obsidian's daily notes, attachments and the
Excalidraw plugin use the same folders as the journal.

An existing vault (one that already has .obsidian/) is never modified.

Usage:
    # Create a vault with daily notes in Logs/ and drawings in Drawings/
    obsidian-init-vault /path/to/vault --daily Logs --excalidraw Drawings

    # Dry-run mode (show what would be created)
    obsidian-init-vault /path/to/vault --daily Logs --assets assets --dry-run
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from skills.config.scripts.config_loader import write_document
from skills.config.scripts.folders import is_vault_folder, normalize_folder
from skills.config.scripts.settings_loader import (
    APP_FILE,
    DAILY_NOTES_FILE,
    EXCALIDRAW_FILE,
    EXCALIDRAW_PLUGIN_DIR,
    OBSIDIAN_DIR,
)

logger = logging.getLogger(__name__)

# Date format written to daily-notes.json for new vaults
DEFAULT_DAILY_FORMAT = "YYYY-MM-DD"


class VaultBootstrapError(Exception):
    """Raised when a vault cannot be initialized."""


def detect_existing_vault(vault_path: Path) -> dict[str, Any]:
    """Detect existing vault state.

    Args:
        vault_path: Path to check

    Returns:
        Dictionary with vault state information
    """
    return {
        "exists": vault_path.is_dir(),
        "has_obsidian": (vault_path / OBSIDIAN_DIR).exists(),
    }


def build_seed_documents(
    daily_logs_folder: str,
    excalidraw_folder: str,
    assets_folder: str,
) -> dict[str, dict[str, Any]]:
    """Build the seed documents for normalized folders.

    Folders that are empty or the vault root get no document.

    Returns:
        Mapping of path (relative to .obsidian/) to JSON content
    """
    documents: dict[str, dict[str, Any]] = {}

    if is_vault_folder(daily_logs_folder):
        documents[DAILY_NOTES_FILE] = {
            "format": DEFAULT_DAILY_FORMAT,
            "folder": daily_logs_folder,
            "template": "",
        }
    if is_vault_folder(assets_folder):
        documents[APP_FILE] = {"attachmentFolderPath": assets_folder}
    if is_vault_folder(excalidraw_folder):
        documents[EXCALIDRAW_FILE] = {"folder": excalidraw_folder}

    return documents


def bootstrap_vault(
    vault_root: str | Path,
    daily_logs_folder: str,
    excalidraw_folder: str = "",
    assets_folder: str = "",
    dry_run: bool = False,
) -> bool:
    """Initialize an Obsidian vault unless one already exists.

    Args:
        vault_root: Path to the vault root (blank is a no-op)
        daily_logs_folder: Folder for daily notes
        excalidraw_folder: Folder for Excalidraw drawings
        assets_folder: Folder for attachments
        dry_run: If True, only print what would be created

    Returns:
        False if there was nothing to do (blank root or existing vault)

    Raises:
        VaultBootstrapError: If a folder or file cannot be created. Anything
            created before the failure is left in place.
    """
    root = str(vault_root).strip()
    if not root:
        return False

    vault_path = Path(root)
    obsidian_dir = vault_path / OBSIDIAN_DIR
    detection = detect_existing_vault(vault_path)
    if detection["has_obsidian"]:
        logger.info(f"Vault already initialized: {vault_path}")
        return False

    folders = [
        normalize_folder(daily_logs_folder),
        normalize_folder(excalidraw_folder),
        normalize_folder(assets_folder),
    ]
    documents = build_seed_documents(*folders)

    if dry_run:
        if not detection["exists"]:
            print(f"  [DRY RUN] Would create: {vault_path}")
        print(f"  [DRY RUN] Would create: {obsidian_dir}")
        for folder in folders:
            if is_vault_folder(folder):
                print(f"  [DRY RUN] Would create: {vault_path / folder}")
        for name in documents:
            print(f"  [DRY RUN] Would create: {obsidian_dir / name}")
        return True

    try:
        obsidian_dir.mkdir(parents=True, exist_ok=True)

        for folder in folders:
            if is_vault_folder(folder):
                (vault_path / folder).mkdir(parents=True, exist_ok=True)

        if EXCALIDRAW_FILE in documents:
            (obsidian_dir / EXCALIDRAW_PLUGIN_DIR).mkdir(parents=True, exist_ok=True)

        for name, content in documents.items():
            write_document(obsidian_dir / name, content)
    except (OSError, ValueError) as e:
        raise VaultBootstrapError(f"Failed to initialize vault at {vault_path}: {e}") from e

    logger.info(f"Initialized vault: {vault_path}")
    return True


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Initialize an Obsidian vault for the journal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Daily notes in Logs/, drawings in Drawings/
  obsidian-init-vault /path/to/vault --daily Logs --excalidraw Drawings

  # Dry run to preview changes
  obsidian-init-vault /path/to/vault --daily Logs --dry-run
""",
    )
    parser.add_argument("vault", type=Path, help="Path to the vault (created if missing)")
    parser.add_argument("--daily", default="", help="Daily notes folder")
    parser.add_argument("--excalidraw", default="", help="Excalidraw drawings folder")
    parser.add_argument("--assets", default="", help="Attachments folder")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be created without actually creating files",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show progress logging")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        created = bootstrap_vault(
            args.vault, args.daily, args.excalidraw, args.assets, args.dry_run
        )
    except VaultBootstrapError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not created:
        print(f"Vault already initialized, nothing to do: {args.vault}")
        return 0

    if not args.dry_run:
        print(f"✓ Vault ready at: {args.vault}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

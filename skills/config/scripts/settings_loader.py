"""
Settings Detector for Obsidian Vaults

Detects journal settings from an existing vault's .obsidian/ folder:
daily notes folder, Excalidraw drawings folder, attachments folder and the
daily note filename pattern.

Sources (relative to .obsidian/):
    daily-notes.json                               core Daily Notes plugin
    plugins/periodic-notes/data.json               Periodic Notes plugin
    app.json                                       attachment folder
    plugins/obsidian-excalidraw-plugin/data.json   Excalidraw plugin

Usage:
    from skills.config.scripts.settings_loader import detect_settings

    snapshot = detect_settings(Path("/path/to/vault"))
    print(snapshot.daily_logs_folder, snapshot.filename_pattern)
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from skills.config.scripts.config_loader import get_object, get_string, read_object
from skills.config.scripts.date_format import translate_date_format
from skills.config.scripts.folders import normalize_folder

OBSIDIAN_DIR = ".obsidian"
DAILY_NOTES_FILE = "daily-notes.json"
PERIODIC_NOTES_FILE = "plugins/periodic-notes/data.json"
APP_FILE = "app.json"
EXCALIDRAW_PLUGIN_DIR = "plugins/obsidian-excalidraw-plugin"
EXCALIDRAW_FILE = f"{EXCALIDRAW_PLUGIN_DIR}/data.json"

# Keys the Excalidraw plugin has used for its drawings folder, in priority order
EXCALIDRAW_FOLDER_KEYS = [
    "folder",
    "excalidrawFolder",
    "drawingFolder",
    "drawingFolderPath",
    "folderPath",
]
FOLDER_HINTS = ("folder", "path", "dir")
EXCALIDRAW_HINT = "excalidraw"


@dataclass(frozen=True)
class SettingsSnapshot:
    """Journal settings detected from a vault."""

    daily_logs_folder: str = ""
    excalidraw_folder: str = ""
    assets_folder: str = ""
    filename_pattern: str = ""

    def to_dict(self) -> dict[str, str]:
        """Convert to the dictionary shape used by the host application."""
        return {
            "dailyLogsFolder": self.daily_logs_folder,
            "excalidrawFolder": self.excalidraw_folder,
            "assetsFolder": self.assets_folder,
            "filenamePattern": self.filename_pattern,
        }


def detect_settings(vault_root: str | Path) -> SettingsSnapshot:
    """
    Detect journal settings from a vault's Obsidian configuration.

    Never fails: missing or corrupt documents simply contribute nothing.

    Args:
        vault_root: Path to the vault root (blank returns an empty snapshot)

    Returns:
        SettingsSnapshot with normalized folders and translated pattern
    """
    root = str(vault_root).strip()
    if not root:
        return SettingsSnapshot()

    obsidian_dir = Path(root) / OBSIDIAN_DIR
    daily_notes = read_object(obsidian_dir / DAILY_NOTES_FILE)
    periodic_daily = get_object(read_object(obsidian_dir / PERIODIC_NOTES_FILE), "daily")
    app_config = read_object(obsidian_dir / APP_FILE)
    excalidraw_config = read_object(obsidian_dir / EXCALIDRAW_FILE)

    return SettingsSnapshot(
        daily_logs_folder=detect_daily_logs_folder(daily_notes, periodic_daily),
        excalidraw_folder=detect_excalidraw_folder(excalidraw_config),
        assets_folder=normalize_folder(get_string(app_config, "attachmentFolderPath")),
        filename_pattern=detect_filename_pattern(daily_notes, periodic_daily),
    )


def detect_daily_logs_folder(
    daily_notes: dict[str, Any] | None,
    periodic_daily: dict[str, Any] | None,
) -> str:
    """Daily notes folder, preferring the core plugin over Periodic Notes."""
    folder = get_string(daily_notes, "folder") or get_string(periodic_daily, "folder")
    return normalize_folder(folder)


def detect_filename_pattern(
    daily_notes: dict[str, Any] | None,
    periodic_daily: dict[str, Any] | None,
) -> str:
    """Filename pattern from the first date format that translates cleanly."""
    pattern = translate_date_format(get_string(daily_notes, "format"))
    if pattern:
        return pattern
    return translate_date_format(get_string(periodic_daily, "format"))


def detect_excalidraw_folder(config: dict[str, Any] | None) -> str:
    """
    Excalidraw drawings folder.

    Known keys are tried first; only if none is set are the remaining
    entries searched by name and value.
    """
    if not config:
        return ""
    folder = find_known_excalidraw_folder(config) or find_excalidraw_folder_by_hint(config)
    return normalize_folder(folder)


def find_known_excalidraw_folder(config: dict[str, Any]) -> str | None:
    """First non-blank value among EXCALIDRAW_FOLDER_KEYS."""
    for key in EXCALIDRAW_FOLDER_KEYS:
        value = get_string(config, key)
        if value:
            return value
    return None


def find_excalidraw_folder_by_hint(config: dict[str, Any]) -> str | None:
    """
    First string entry that looks like an Excalidraw folder setting.

    An entry matches when its key or value mentions a folder, path or dir,
    and its key or value mentions excalidraw (both case-insensitive).
    """
    for key in config:
        value = get_string(config, key)
        if value is None:
            continue
        text = f"{key}\n{value}".lower()
        if any(hint in text for hint in FOLDER_HINTS) and EXCALIDRAW_HINT in text:
            return value
    return None


def main() -> int:
    """CLI entry point for settings detection."""
    import argparse
    import logging

    parser = argparse.ArgumentParser(description="Detect journal settings from an Obsidian vault")
    parser.add_argument("vault", type=Path, help="Path to the vault root")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log skipped documents")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    snapshot = detect_settings(args.vault)

    if args.json:
        print(json.dumps(snapshot.to_dict(), indent=2))
        return 0

    print(f"Vault: {args.vault}")
    print(f"  Daily notes folder: {snapshot.daily_logs_folder or '(not set)'}")
    print(f"  Excalidraw folder:  {snapshot.excalidraw_folder or '(not set)'}")
    print(f"  Assets folder:      {snapshot.assets_folder or '(not set)'}")
    print(f"  Filename pattern:   {snapshot.filename_pattern or '(not detected)'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

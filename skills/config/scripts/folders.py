"""
Folder Path Normalization for Obsidian Vaults

Obsidian stores folder settings in many shapes ("/Daily/", "./Daily", "Daily").
All of them are reduced to one canonical vault-relative form.

Usage:
    from skills.config.scripts.folders import normalize_folder, is_vault_folder

    normalize_folder("./Calendar/daily/")  # "Calendar/daily"
    normalize_folder("/")                  # "." (the vault root itself)
"""

from __future__ import annotations

# Normalized value meaning "the vault root itself"
VAULT_ROOT = "."

_ROOT_ALIASES = {"/", "./", "."}


def normalize_folder(raw: str | None) -> str:
    """
    Normalize a folder setting to a vault-relative path.

    Args:
        raw: Folder value as stored by Obsidian or typed by the user

    Returns:
        "" for empty input, "." for any spelling of the vault root,
        otherwise the path without leading "./" or slashes and without
        trailing slashes

    Examples:
        >>> normalize_folder("/Notes/")
        'Notes'
        >>> normalize_folder("./a/b/")
        'a/b'
        >>> normalize_folder("./")
        '.'
    """
    if not raw:
        return ""

    value = raw.strip()
    if not value:
        return ""
    if value in _ROOT_ALIASES:
        return VAULT_ROOT

    if value.startswith("./"):
        value = value[2:]
    return value.lstrip("/").rstrip("/")


def is_vault_folder(normalized: str) -> bool:
    """Check if a normalized folder names a real subfolder (not empty, not the root)."""
    return bool(normalized) and normalized != VAULT_ROOT

"""
Obsidian Commands - Host Command Layer

Provides a unified entry point for the obsidian: namespace commands used by
the journal application.

Usage:
    from skills.obsidian_commands import route_command, detect_settings_command

Commands:
    obsidian:find-vaults       - Find vaults in the home directory
    obsidian:detect-settings   - Detect journal settings from a vault
    obsidian:bootstrap-vault   - Initialize a vault with journal folders
"""

from __future__ import annotations

from .router import (
    CommandResult,
    CommandRouter,
    bootstrap_vault_command,
    detect_settings_command,
    find_vaults_command,
    route_command,
)

__all__ = [
    "CommandResult",
    "CommandRouter",
    "bootstrap_vault_command",
    "detect_settings_command",
    "find_vaults_command",
    "route_command",
]

__version__ = "1.0.0"

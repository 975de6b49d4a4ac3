"""
Command Router for Obsidian Vault Commands

Exposes vault discovery, settings detection and vault initialization to a
host application. Every command returns a CommandResult and never raises;
routed commands print the result as JSON.

Usage:
    from skills.obsidian_commands.router import CommandRouter, route_command

    # Call an operation directly
    result = detect_settings_command("/path/to/vault")
    result.data["dailyLogsFolder"]

    # Route an argv-style command (prints JSON, returns exit code)
    route_command("obsidian:find-vaults", ["--home", "/data"])
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from skills.config.scripts.config_loader import load_scan_config
from skills.config.scripts.settings_loader import detect_settings
from skills.find.scripts.find_vaults import VaultScanError, find_vaults
from skills.init.scripts.init_vault import VaultBootstrapError, bootstrap_vault

# Type alias for command handlers
CommandHandler = Callable[[list[str]], int]


@dataclass
class CommandResult:
    """Outcome of a host command."""

    ok: bool
    data: Any = None
    error: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        if self.ok:
            return {"ok": True, "data": self.data}
        return {"ok": False, "error": self.error}


@dataclass
class CommandInfo:
    """Information about a registered command."""

    name: str
    handler: CommandHandler
    description: str = ""
    arguments: list[str] = field(default_factory=list)


# =============================================================================
# Host Operations
# =============================================================================


def find_vaults_command(
    home: str | Path | None = None,
    config_path: str | Path | None = None,
) -> CommandResult:
    """Find vaults below the home directory."""
    try:
        config = load_scan_config(Path(config_path) if config_path else None)
        vaults = find_vaults(Path(home) if home else None, config)
    except (VaultScanError, ValueError) as e:
        return CommandResult(ok=False, error=str(e))
    return CommandResult(ok=True, data=vaults)


def detect_settings_command(vault_dir: str | Path) -> CommandResult:
    """Detect journal settings from a vault (always succeeds)."""
    return CommandResult(ok=True, data=detect_settings(vault_dir).to_dict())


def bootstrap_vault_command(
    vault_dir: str | Path,
    daily_logs_folder: str,
    excalidraw_folder: str = "",
    assets_folder: str = "",
) -> CommandResult:
    """Initialize a vault unless it already has Obsidian configuration."""
    try:
        bootstrap_vault(vault_dir, daily_logs_folder, excalidraw_folder, assets_folder)
    except VaultBootstrapError as e:
        return CommandResult(ok=False, error=str(e))
    return CommandResult(ok=True)


# =============================================================================
# Router
# =============================================================================


class CommandRouter:
    """Routes argv-style commands to the host operations."""

    def __init__(self) -> None:
        """Initialize the command router."""
        self._commands: dict[str, CommandInfo] = {}
        self._register_builtin_commands()

    def _register_builtin_commands(self) -> None:
        """Register all built-in obsidian commands."""
        self.register(
            "obsidian:find-vaults",
            self._handler_find_vaults,
            "Find Obsidian vaults in the home directory",
            arguments=["--home PATH", "--config FILE"],
        )
        self.register(
            "obsidian:detect-settings",
            self._handler_detect_settings,
            "Detect journal settings from a vault",
            arguments=["VAULT"],
        )
        self.register(
            "obsidian:bootstrap-vault",
            self._handler_bootstrap_vault,
            "Initialize a vault with journal folders",
            arguments=["VAULT", "--daily F", "--excalidraw F", "--assets F"],
        )

    def register(
        self,
        name: str,
        handler: CommandHandler,
        description: str = "",
        arguments: list[str] | None = None,
    ) -> None:
        """Register a command handler.

        Args:
            name: Command name (e.g., "obsidian:find-vaults")
            handler: Function to handle the command
            description: Human-readable description
            arguments: Argument synopsis shown by --list
        """
        self._commands[name] = CommandInfo(
            name=name,
            handler=handler,
            description=description,
            arguments=arguments or [],
        )

    def get_handler(self, command: str) -> CommandHandler | None:
        """Get handler for a command (with or without obsidian: prefix)."""
        info = self._commands.get(self._normalize_command(command))
        return info.handler if info else None

    def _normalize_command(self, command: str) -> str:
        """Normalize command name to canonical form."""
        cmd = command.lstrip("/").strip()
        if not cmd.startswith("obsidian:"):
            cmd = f"obsidian:{cmd}"
        return cmd

    def list_commands(self) -> list[CommandInfo]:
        """List all registered commands."""
        return list(self._commands.values())

    def route(self, command: str, args: list[str]) -> int:
        """Route a command to its handler.

        Args:
            command: Command name
            args: Command arguments

        Returns:
            Exit code from handler (0 = success)
        """
        handler = self.get_handler(command)
        if handler is None:
            print(f"Unknown command: {command}", file=sys.stderr)
            print("Available commands:", file=sys.stderr)
            for cmd_info in self.list_commands():
                print(f"  {cmd_info.name}: {cmd_info.description}", file=sys.stderr)
            return 1

        return handler(args)

    def _handler_find_vaults(self, args: list[str]) -> int:
        """Handle obsidian:find-vaults command."""
        parser = argparse.ArgumentParser(prog="obsidian:find-vaults")
        parser.add_argument("--home")
        parser.add_argument("--config")
        parsed = parser.parse_args(args)
        return self._emit(find_vaults_command(parsed.home, parsed.config))

    def _handler_detect_settings(self, args: list[str]) -> int:
        """Handle obsidian:detect-settings command."""
        parser = argparse.ArgumentParser(prog="obsidian:detect-settings")
        parser.add_argument("vault", nargs="?", default="")
        parsed = parser.parse_args(args)
        return self._emit(detect_settings_command(parsed.vault))

    def _handler_bootstrap_vault(self, args: list[str]) -> int:
        """Handle obsidian:bootstrap-vault command."""
        parser = argparse.ArgumentParser(prog="obsidian:bootstrap-vault")
        parser.add_argument("vault", nargs="?", default="")
        parser.add_argument("--daily", default="")
        parser.add_argument("--excalidraw", default="")
        parser.add_argument("--assets", default="")
        parsed = parser.parse_args(args)
        return self._emit(
            bootstrap_vault_command(parsed.vault, parsed.daily, parsed.excalidraw, parsed.assets)
        )

    @staticmethod
    def _emit(result: CommandResult) -> int:
        """Print a result as JSON and convert it to an exit code."""
        print(json.dumps(result.to_dict(), indent=2))
        return 0 if result.ok else 1


# Global router instance
_router: CommandRouter | None = None


def get_router() -> CommandRouter:
    """Get or create the global command router."""
    global _router
    if _router is None:
        _router = CommandRouter()
    return _router


def route_command(command: str, args: list[str] | None = None) -> int:
    """Route a command to its handler.

    Convenience function for the global router.

    Args:
        command: Command name (e.g., "obsidian:detect-settings")
        args: Command arguments

    Returns:
        Exit code (0 = success)
    """
    return get_router().route(command, args or [])


def main() -> int:
    """CLI entry point for command router."""
    parser = argparse.ArgumentParser(description="Obsidian Vault Command Router")
    parser.add_argument("command", nargs="?", help="Command to run")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Command arguments")
    parser.add_argument("--list", action="store_true", help="List available commands")

    args = parser.parse_args()

    if args.list:
        print("\nObsidian Commands:")
        print("=" * 60)
        for cmd in get_router().list_commands():
            print(f"\n  {cmd.name}")
            print(f"    {cmd.description}")
            if cmd.arguments:
                print(f"    Arguments: {' '.join(cmd.arguments)}")
        print()
        return 0

    if not args.command:
        parser.print_help()
        return 0

    return route_command(args.command, args.args)


if __name__ == "__main__":
    sys.exit(main())

"""
Tests for init skill

Run with: uv run pytest tests/test_init.py -v
Coverage: uv run pytest tests/test_init.py -v --cov=skills/init --cov-report=term-missing
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from skills.init.scripts.init_vault import (
    VaultBootstrapError,
    bootstrap_vault,
    build_seed_documents,
    detect_existing_vault,
    main,
)

EXCALIDRAW_DATA = Path(".obsidian") / "plugins" / "obsidian-excalidraw-plugin" / "data.json"


def snapshot_tree(root: Path) -> dict:
    """Map every path under root to its file content (None for folders)"""
    return {
        str(p.relative_to(root)): (p.read_text() if p.is_file() else None)
        for p in sorted(root.rglob("*"))
    }


class TestDetectExistingVault:
    """Test vault detection"""

    def test_missing(self, tmp_path):
        """Test detection of a missing folder"""
        assert detect_existing_vault(tmp_path / "missing") == {
            "exists": False,
            "has_obsidian": False,
        }

    def test_existing_vault(self, empty_vault):
        """Test detection of an initialized vault"""
        assert detect_existing_vault(empty_vault)["has_obsidian"] is True


class TestBuildSeedDocuments:
    """Test seed document generation"""

    def test_all_folders(self):
        """Test documents for every qualifying folder"""
        documents = build_seed_documents("Logs", "Drawings", "assets")
        assert documents == {
            "daily-notes.json": {"format": "YYYY-MM-DD", "folder": "Logs", "template": ""},
            "app.json": {"attachmentFolderPath": "assets"},
            "plugins/obsidian-excalidraw-plugin/data.json": {"folder": "Drawings"},
        }

    def test_empty_and_root_folders_skipped(self):
        """Test that empty and vault-root folders produce no documents"""
        assert build_seed_documents("", ".", "") == {}


class TestBootstrapVault:
    """Test vault initialization"""

    def test_fresh_vault(self, tmp_path):
        """Test folders and seed documents in a fresh directory"""
        vault = tmp_path / "vault"
        vault.mkdir()

        assert bootstrap_vault(vault, "Logs", "Drawings", "") is True

        assert (vault / ".obsidian").is_dir()
        assert (vault / "Logs").is_dir()
        assert (vault / "Drawings").is_dir()
        assert not (vault / ".obsidian" / "app.json").exists()

        daily = json.loads((vault / ".obsidian" / "daily-notes.json").read_text())
        assert daily == {"format": "YYYY-MM-DD", "folder": "Logs", "template": ""}
        excalidraw = json.loads((vault / EXCALIDRAW_DATA).read_text())
        assert excalidraw == {"folder": "Drawings"}

    def test_pretty_printed(self, tmp_path):
        """Test that seed documents are indented"""
        bootstrap_vault(tmp_path, "", "", "assets")
        content = (tmp_path / ".obsidian" / "app.json").read_text()
        assert content == '{\n  "attachmentFolderPath": "assets"\n}\n'

    def test_folders_normalized(self, tmp_path):
        """Test that folder inputs are normalized before use"""
        bootstrap_vault(tmp_path, " ./Calendar/daily/ ", "", "/assets/")
        assert (tmp_path / "Calendar" / "daily").is_dir()
        daily = json.loads((tmp_path / ".obsidian" / "daily-notes.json").read_text())
        assert daily["folder"] == "Calendar/daily"
        app = json.loads((tmp_path / ".obsidian" / "app.json").read_text())
        assert app == {"attachmentFolderPath": "assets"}

    def test_vault_root_folders(self, tmp_path):
        """Test that vault-root folders create only the marker"""
        bootstrap_vault(tmp_path, "/", ".", "./")
        assert snapshot_tree(tmp_path) == {".obsidian": None}

    def test_creates_missing_vault_directory(self, tmp_path):
        """Test that intermediate directories are created"""
        vault = tmp_path / "new" / "vault"
        bootstrap_vault(str(vault), "Logs")
        assert (vault / ".obsidian" / "daily-notes.json").exists()

    def test_existing_vault_untouched(self, configured_vault):
        """Test that an existing vault is never modified"""
        before = snapshot_tree(configured_vault)
        assert bootstrap_vault(configured_vault, "Other", "Sketches", "media") is False
        assert snapshot_tree(configured_vault) == before

    def test_blank_root_is_noop(self, tmp_path, monkeypatch):
        """Test that a blank root does nothing"""
        monkeypatch.chdir(tmp_path)
        assert bootstrap_vault("  ", "Logs", "Drawings", "assets") is False
        assert list(tmp_path.iterdir()) == []

    def test_dry_run(self, tmp_path, capsys):
        """Test that dry run reports without creating anything"""
        vault = tmp_path / "vault"
        bootstrap_vault(vault, "Logs", "Drawings", "assets", dry_run=True)

        assert not vault.exists()
        output = capsys.readouterr().out
        assert "[DRY RUN] Would create" in output
        assert "daily-notes.json" in output
        assert "app.json" in output

    def test_write_failure(self, tmp_path):
        """Test that a write failure raises and leaves created folders"""
        with patch(
            "skills.init.scripts.init_vault.write_document",
            side_effect=PermissionError("denied"),
        ):
            with pytest.raises(VaultBootstrapError, match="Failed to initialize vault"):
                bootstrap_vault(tmp_path, "Logs", "", "")

        assert (tmp_path / ".obsidian").is_dir()
        assert (tmp_path / "Logs").is_dir()

    def test_folder_blocked_by_file(self, tmp_path):
        """Test that a file in place of a folder raises"""
        (tmp_path / "Logs").write_text("not a folder")
        with pytest.raises(VaultBootstrapError):
            bootstrap_vault(tmp_path, "Logs")

    def test_null_byte_in_path(self, tmp_path):
        """Test that an unusable vault path raises VaultBootstrapError"""
        with pytest.raises(VaultBootstrapError, match="Failed to initialize vault"):
            bootstrap_vault(f"{tmp_path}/a\0b", "Logs")


class TestMain:
    """Test CLI entry point"""

    def test_creates_vault(self, tmp_path, capsys):
        """Test initialization through the CLI"""
        argv = ["init_vault.py", str(tmp_path), "--daily", "Logs", "--excalidraw", "Drawings"]
        with patch("sys.argv", argv):
            assert main() == 0
        assert (tmp_path / "Logs").is_dir()
        assert "Vault ready" in capsys.readouterr().out

    def test_existing_vault(self, empty_vault, capsys):
        """Test that an existing vault is reported and left alone"""
        with patch("sys.argv", ["init_vault.py", str(empty_vault), "--daily", "Logs"]):
            assert main() == 0
        assert "already initialized" in capsys.readouterr().out
        assert not (empty_vault / "Logs").exists()

    def test_failure_exit_code(self, tmp_path, capsys):
        """Test that failures exit with 1"""
        (tmp_path / "Logs").write_text("")
        with patch("sys.argv", ["init_vault.py", str(tmp_path), "--daily", "Logs"]):
            assert main() == 1
        assert "Error:" in capsys.readouterr().err

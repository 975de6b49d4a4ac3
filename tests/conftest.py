"""
Pytest configuration and shared fixtures
"""

import json
import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    """Add repository root to Python path for skills imports"""
    base = Path(__file__).parent.parent
    if str(base) not in sys.path:
        sys.path.insert(0, str(base))


def write_json(path: Path, data) -> Path:
    """Write a JSON document, creating parent folders"""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def empty_vault(tmp_path):
    """Create a vault with an empty .obsidian folder"""
    vault = tmp_path / "vault"
    (vault / ".obsidian").mkdir(parents=True)
    return vault


@pytest.fixture
def configured_vault(empty_vault):
    """Create a vault with daily notes, attachments and Excalidraw configured"""
    obsidian = empty_vault / ".obsidian"
    write_json(
        obsidian / "daily-notes.json",
        {"folder": "/Calendar/daily/", "format": "YYYY-MM-DD", "template": ""},
    )
    write_json(obsidian / "app.json", {"attachmentFolderPath": "./assets"})
    write_json(
        obsidian / "plugins" / "obsidian-excalidraw-plugin" / "data.json",
        {"folder": "Excalidraw/", "templateFilePath": "Excalidraw/Template.excalidraw"},
    )
    return empty_vault


@pytest.fixture
def home_tree(tmp_path):
    """Create a fake home directory containing several vaults"""
    home = tmp_path / "home"
    for vault in ["Notes", "Documents/Work/Journal", "Projects/app/docs"]:
        (home / vault / ".obsidian").mkdir(parents=True)
    (home / "Documents" / "Drafts").mkdir(parents=True)
    return home

"""
Pytest configuration and fixtures
"""

import copy
import json
import pytest
from pathlib import Path
from typing import Any, Dict

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from localetree.config import load_config
from localetree.services.classifier import IntentionalMatchTable
from localetree.services.locale_store import LocaleStore


REFERENCE: Dict[str, Any] = {
    "common": {
        "save": "Save",
        "cancel": "Cancel",
        "ok": "OK",
    },
    "auth": {
        "login": {"title": "Log in", "button": "Sign in"},
        "register": {"title": "Sign up"},
    },
    "club": {
        "share": "Check out this club: {{name}}",
        "tags": ["tennis", "pickleball"],
    },
    "languages": {"fr": "Français"},
}

FRENCH: Dict[str, Any] = {
    "common": {
        "save": "Enregistrer",
        "cancel": "Cancel",
        "ok": "OK",
    },
    "auth": {
        "login": {"title": "Connexion"},
        "register": {"title": "S'inscrire"},
    },
    "club": {
        "share": "Check out this club: {{name}}",
        "tags": ["tennis", "pickleball"],
        "legacy": "Ancien",
    },
    "languages": {"fr": "Français"},
}


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch) -> None:
    """Keep environment and cached settings from leaking between tests."""
    for name in (
        "LOCALES_DIR", "REFERENCE_LANGUAGE", "TARGET_LANGUAGES", "LOCALE_INDENT",
        "INTENTIONAL_MATCHES_FILE", "PLACEHOLDER_PATTERN", "LOG_LEVEL", "DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(load_config, "_settings", None)


@pytest.fixture
def reference_tree() -> Dict[str, Any]:
    """English reference locale."""
    return copy.deepcopy(REFERENCE)


@pytest.fixture
def french_tree() -> Dict[str, Any]:
    """Partially translated French locale."""
    return copy.deepcopy(FRENCH)


@pytest.fixture
def match_table() -> IntentionalMatchTable:
    """Allow-list with a global term and a French autonym."""
    return IntentionalMatchTable.from_mapping({"*": ["OK"], "fr": ["Français"]})


@pytest.fixture
def store() -> LocaleStore:
    return LocaleStore()


@pytest.fixture
def locales_dir(tmp_path: Path, reference_tree, french_tree) -> Path:
    """Locales directory with en, fr and an empty de locale."""
    directory = tmp_path / "locales"
    directory.mkdir()
    writer = LocaleStore()
    writer.write_json(directory / "en.json", reference_tree)
    writer.write_json(directory / "fr.json", french_tree)
    writer.write_json(directory / "de.json", {})
    return directory


@pytest.fixture
def matches_file(tmp_path: Path) -> Path:
    path = tmp_path / "intentional_matches.json"
    path.write_text(json.dumps({"*": ["OK"], "fr": ["Français"]}), encoding="utf-8")
    return path

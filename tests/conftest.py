"""Shared fixtures for Localis tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from localis.i18n import store as store_module

LANGUAGE_FILES = {
    "language.properties": (
        "# Default strings\n"
        "greeting=Hello\n"
        "farewell=Goodbye\n"
        "colour=Color\n"
    ),
    "language_fr.properties": (
        "greeting=Bonjour\n"
        "farewell=Au revoir\n"
    ),
    "language_fr_CA.properties": (
        "greeting=Allô\n"
    ),
    "language_de_AT_WI.properties": (
        "greeting=Servus\n"
    ),
}


@pytest.fixture(autouse=True)
def reset_store(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without a process-wide store."""
    monkeypatch.setattr(store_module, "_store", None)


@pytest.fixture
def languages_dir(tmp_path: Path) -> Path:
    """Languages directory for the default bundle, with a few locales."""
    directory = tmp_path / "res" / "localis" / "localisation"
    directory.mkdir(parents=True)

    for name, content in LANGUAGE_FILES.items():
        (directory / name).write_text(content, encoding="utf-8")

    # Not a language file, must be ignored
    (directory / "README.txt").write_text("not a language file\n", encoding="utf-8")

    return directory


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Path of a config file that does not exist yet."""
    return tmp_path / "settings" / "language.properties"


@pytest.fixture
def fr_config_file(config_file: Path) -> Path:
    """Config file selecting French."""
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text("Language=fr\nCountry=\nVariant=\n", encoding="utf-8")
    return config_file

"""
Locale configuration store.

Keeps the display language of an application. The selected locale is
persisted in a small properties file:

    Language=fr
    Country=CA
    Variant=

All strings are loaded once, when the store is created. Selecting another
locale rewrites the config file and takes effect the next time the
application starts.

Components can either own a LocaleConfigStore instance:

    store = LocaleConfigStore("settings/language.properties", "res/localis/localisation")
    title = store.get_string("main.title")

or use the process-wide store:

    configure("settings/language.properties", "res/localis/localisation")
    title = get_string("main.title")
"""

from __future__ import annotations

import configparser
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from localis.i18n.bundle import (
    BUNDLE_NAME,
    PropertiesBundleLoader,
    StringTableLoader,
    bundle_directory_suffix,
    search_root_for,
)
from localis.i18n.exceptions import (
    ConfigurationError,
    LocalisationErrorCode,
    NotConfiguredError,
)
from localis.i18n.locale import (
    ROOT_LOCALE,
    Locale,
    is_language_file,
    parse_language_filename,
)
from localis.i18n.properties import read_properties, write_properties
from localis.i18n.selection import LocaleRequirement

logger = logging.getLogger(__name__)

# Wraps keys that have no translation: "title" -> "!title!"
MISSING_KEY_MARKER = "!"

# Process-wide store
_store: LocaleConfigStore | None = None


@dataclass(frozen=True)
class ConfigLoadResult:
    """Outcome of reading the locale config file."""

    locale: Locale
    properties: dict[str, str] = field(default_factory=dict)
    from_file: bool = True
    message: str = ""

    @classmethod
    def loaded(cls, properties: dict[str, str]) -> "ConfigLoadResult":
        """Create a result for a successfully read file."""
        return cls(locale=Locale.from_properties(properties), properties=properties)

    @classmethod
    def default(cls, message: str, properties: dict[str, str] | None = None) -> "ConfigLoadResult":
        """Create a result falling back to the default locale."""
        merged = dict(properties or {})
        merged.update(ROOT_LOCALE.to_properties())
        return cls(locale=ROOT_LOCALE, properties=merged, from_file=False, message=message)


def load_locale_config(config_file: Path | str) -> ConfigLoadResult:
    """
    Read the persisted locale selection.

    Never raises: any problem yields the default locale and a warning.

    Args:
        config_file: Path to the config file

    Returns:
        ConfigLoadResult with the locale and all entries of the file
    """
    path = Path(config_file)
    try:
        properties = read_properties(path)
    except FileNotFoundError:
        message = f"Couldn't load language config file: '{path}'. Falling back to default settings."
        logger.warning(message)
        return ConfigLoadResult.default(message)
    except (OSError, UnicodeDecodeError, configparser.Error) as e:
        message = (
            f"Couldn't read from language config file: '{path}' ({e}). "
            "Falling back to default settings."
        )
        logger.warning(message)
        return ConfigLoadResult.default(message)

    result = ConfigLoadResult.loaded(properties)
    # The three locale keys are always present in the properties
    properties.update(result.locale.to_properties())

    if not result.locale.is_valid():
        message = (
            f"Invalid locale '{result.locale!s}' in language config file: '{path}'. "
            "Falling back to default settings."
        )
        logger.warning(message)
        return ConfigLoadResult.default(message, properties)

    return result


class LocaleConfigStore:
    """
    Selected locale and its strings.

    Responsibilities:
    - Read the persisted locale from the config file
    - Load the string table for that locale
    - List the locales available in the languages directory
    - Persist a newly selected locale
    """

    def __init__(
        self,
        config_file: Path | str,
        languages_directory: Path | str,
        *,
        bundle_name: str = BUNDLE_NAME,
        loader: StringTableLoader | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            config_file: Path of the file holding the selected locale
            languages_directory: Directory with the language*.properties files.
                It must end with the bundle name's directories, e.g.
                "localis/localisation" for "localis.localisation.language".
            bundle_name: Dotted name of the string bundle
            loader: String table loader (default: properties files resolved
                from the languages directory)

        Raises:
            ConfigurationError: If languages_directory has the wrong ending
            ResourceLoadError: If no strings exist for the selected locale
        """
        self._config_file = Path(config_file)
        self._languages_directory = Path(languages_directory)
        self._bundle_name = bundle_name

        suffix = bundle_directory_suffix(bundle_name)
        if suffix and self._languages_directory.parts[-len(suffix):] != suffix:
            expected = str(Path(*suffix))
            raise ConfigurationError(
                f"Invalid languages directory '{self._languages_directory}'. "
                f"It must end with '{expected}'",
                code=LocalisationErrorCode.INVALID_DIRECTORY,
                details={"directory": str(self._languages_directory), "expected": expected},
            )

        if loader is None:
            loader = PropertiesBundleLoader(
                [search_root_for(self._languages_directory, bundle_name)]
            )
        self._loader = loader

        self._config = load_locale_config(self._config_file)
        self._properties = dict(self._config.properties)
        self._locale = self._config.locale
        self._strings: Mapping[str, str] = MappingProxyType(
            dict(self._loader.load_string_table(bundle_name, self._locale))
        )

        logger.debug(f"Locale store ready: locale={self._locale!s}, strings={len(self._strings)}")

    @property
    def config_file(self) -> Path:
        """Path of the config file."""
        return self._config_file

    @property
    def languages_directory(self) -> Path:
        """Directory containing the language files."""
        return self._languages_directory

    @property
    def bundle_name(self) -> str:
        """Dotted name of the string bundle."""
        return self._bundle_name

    @property
    def locale(self) -> Locale:
        """Locale the strings were loaded for."""
        return self._locale

    @property
    def config_result(self) -> ConfigLoadResult:
        """How the config file was read at startup."""
        return self._config

    @property
    def properties(self) -> dict[str, str]:
        """Copy of the config file entries."""
        return dict(self._properties)

    @property
    def string_table(self) -> Mapping[str, str]:
        """Read-only view of the loaded strings."""
        return self._strings

    def has_key(self, key: str) -> bool:
        """Check if a string exists for key."""
        return key in self._strings

    def get_string(self, key: str) -> str:
        """
        Get a localized string.

        Args:
            key: String key

        Returns:
            The localized string, or the key wrapped in "!" if missing
        """
        value = self._strings.get(key)
        if value is None:
            logger.debug(f"Missing string: {key}")
            return f"{MISSING_KEY_MARKER}{key}{MISSING_KEY_MARKER}"
        return value

    def list_available_locales(self) -> list[Locale] | None:
        """
        Find the locales that have a language file.

        Returns:
            Locales sorted by file name, or None if the directory can't be
            listed or holds no language file
        """
        directory = self._languages_directory
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            logger.warning(f"Path '{directory}' does not correspond to a directory ({e})")
            return None

        locales: list[Locale] = []
        for entry in entries:
            if not is_language_file(entry.name):
                continue

            locale = parse_language_filename(entry.name)
            if locale is None:
                logger.warning(f"Invalid language properties file name: '{entry.name}'")
                continue

            locales.append(locale)

        return locales or None

    def language_requirement(self) -> LocaleRequirement | None:
        """
        Offer the available locales for selection.

        Returns:
            A requirement listing the available locales, or None if there are none
        """
        locales = self.list_available_locales()
        if locales is None:
            return None
        return LocaleRequirement(locales)

    def select_locale(self, chosen: Locale | None) -> bool:
        """
        Persist a new locale in the config file.

        The strings of this store are not reloaded; the new locale is used
        when a store is next created from the config file.

        Args:
            chosen: Locale to select

        Returns:
            True if the config file was rewritten, False if chosen is None,
            invalid, or already the current locale

        Raises:
            OSError: If the config file cannot be written
        """
        if chosen is None or not chosen.is_valid() or chosen == self._locale:
            return False

        self._properties.update(chosen.to_properties())
        write_properties(self._config_file, self._properties)

        logger.info(f"Locale changed from {self._locale!s} to {chosen!s} (applies on next start)")
        return True

    def update_language(self, requirement: LocaleRequirement) -> bool:
        """
        Persist the locale chosen in a requirement.

        Returns:
            False if nothing was chosen, otherwise the result of select_locale()
        """
        if not requirement.fulfilled:
            return False
        return self.select_locale(requirement.value)

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__}(config_file={self._config_file}, "
            f"locale={self._locale!s})>"
        )


def configure_unsafe(
    config_file: Path | str,
    languages_directory: Path | str,
    *,
    bundle_name: str = BUNDLE_NAME,
    loader: StringTableLoader | None = None,
) -> LocaleConfigStore:
    """
    Configure the process-wide store, replacing any previous one.

    Strings already fetched from a previous store are not updated.
    Prefer configure().
    """
    global _store
    _store = LocaleConfigStore(
        config_file, languages_directory, bundle_name=bundle_name, loader=loader
    )
    return _store


def configure(
    config_file: Path | str,
    languages_directory: Path | str,
    *,
    bundle_name: str = BUNDLE_NAME,
    loader: StringTableLoader | None = None,
) -> LocaleConfigStore:
    """
    Configure the process-wide store. Must be called exactly once.

    Raises:
        ConfigurationError: If the store has already been configured
    """
    if _store is not None:
        raise ConfigurationError(
            "The locale store has already been configured. Call configure() only once.",
            code=LocalisationErrorCode.ALREADY_CONFIGURED,
        )
    return configure_unsafe(
        config_file, languages_directory, bundle_name=bundle_name, loader=loader
    )


def is_configured() -> bool:
    """Check whether the process-wide store exists."""
    return _store is not None


def get_store() -> LocaleConfigStore:
    """
    Get the process-wide store.

    Raises:
        NotConfiguredError: If configure() has not been called
    """
    if _store is None:
        raise NotConfiguredError()
    return _store


def get_string(key: str) -> str:
    """Shorthand for get_store().get_string()."""
    return get_store().get_string(key)


def get_config_file() -> Path:
    """Path of the config file of the process-wide store."""
    return get_store().config_file


def get_languages_directory() -> Path:
    """Languages directory of the process-wide store."""
    return get_store().languages_directory


def get_bundle_name() -> str:
    """Bundle name of the process-wide store."""
    return get_store().bundle_name


def list_available_locales() -> list[Locale] | None:
    """Locales available to the process-wide store."""
    return get_store().list_available_locales()


def get_language_requirement() -> LocaleRequirement | None:
    """Selectable locales of the process-wide store."""
    return get_store().language_requirement()


def select_locale(chosen: Locale | None) -> bool:
    """Persist a new locale through the process-wide store."""
    return get_store().select_locale(chosen)


def update_language(requirement: LocaleRequirement) -> bool:
    """Persist the locale chosen in a requirement through the process-wide store."""
    return get_store().update_language(requirement)

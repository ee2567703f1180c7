"""
String table loading for resource bundles.

A bundle is named by a dotted path such as ``localis.localisation.language``.
The last component is the file base name, the others are directories
relative to a search root:

    <root>/localis/localisation/language.properties
    <root>/localis/localisation/language_fr.properties
    <root>/localis/localisation/language_fr_CA.properties

Lookups fall back from the most specific file to the least specific one,
so a key missing from ``language_fr_CA`` is taken from ``language_fr``
and then from ``language``.
"""

from __future__ import annotations

import configparser
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from pathlib import Path

from localis.i18n.exceptions import ResourceLoadError
from localis.i18n.locale import LANGUAGE_FILE_SUFFIX, Locale
from localis.i18n.properties import read_properties

logger = logging.getLogger(__name__)

# Bundle of the packaged language files
BUNDLE_NAME = "localis.localisation.language"


def bundle_directory_suffix(bundle_name: str) -> tuple[str, ...]:
    """
    Directory parts a languages directory must end with for a bundle.

    "localis.localisation.language" -> ("localis", "localisation")
    """
    return tuple(bundle_name.split(".")[:-1])


def search_root_for(languages_directory: Path | str, bundle_name: str) -> Path:
    """
    Return the search root from which a bundle resolves to a languages directory.

    Args:
        languages_directory: Directory holding the language files
        bundle_name: Dotted bundle name

    Returns:
        The ancestor of languages_directory acting as search root
    """
    directory = Path(languages_directory)
    depth = len(bundle_directory_suffix(bundle_name))
    for _ in range(depth):
        directory = directory.parent
    return directory


def _find_ignoring_case(directory: Path, file_name: str) -> Path | None:
    try:
        entries = sorted(directory.iterdir())
    except OSError:
        return None
    wanted = file_name.casefold()
    for entry in entries:
        if entry.name.casefold() == wanted and entry.is_file():
            return entry
    return None


class StringTableLoader(ABC):
    """
    Abstract loader of localized string tables.

    Example:
        class DictLoader(StringTableLoader):
            def load_string_table(self, bundle_name, locale):
                return {"greeting": "Hello"}
    """

    @abstractmethod
    def load_string_table(self, bundle_name: str, locale: Locale) -> Mapping[str, str]:
        """
        Load the strings of a bundle for a locale.

        Args:
            bundle_name: Dotted bundle name
            locale: Requested locale

        Returns:
            Mapping of key -> localized text

        Raises:
            ResourceLoadError: If no resource exists for the locale or its fallbacks
        """
        ...


class PropertiesBundleLoader(StringTableLoader):
    """Loads bundles from ``.properties`` files found under search roots."""

    def __init__(self, search_path: Iterable[Path | str]) -> None:
        """
        Initialize the loader.

        Args:
            search_path: Root directories searched in order
        """
        self._search_path = [Path(p) for p in search_path]

    @property
    def search_path(self) -> list[Path]:
        """Root directories searched in order."""
        return list(self._search_path)

    def find_resource(self, bundle_name: str, locale: Locale) -> Path | None:
        """
        Locate the file holding a single locale of a bundle.

        Args:
            bundle_name: Dotted bundle name
            locale: Exact locale (no fallback)

        Returns:
            Path of the first matching file, or None
        """
        *directories, base_name = bundle_name.split(".")
        file_name = f"{base_name}{locale.file_suffix()}{LANGUAGE_FILE_SUFFIX}"

        for root in self._search_path:
            candidate = root.joinpath(*directories, file_name)
            if candidate.is_file():
                return candidate
            # Files may spell the locale in another case ("language_EL_gr")
            match = _find_ignoring_case(candidate.parent, file_name)
            if match is not None:
                return match
        return None

    def load_string_table(self, bundle_name: str, locale: Locale) -> dict[str, str]:
        """Load a bundle, merging the locale's fallback chain."""
        resources: list[Path] = []
        for candidate in locale.candidates():
            resource = self.find_resource(bundle_name, candidate)
            if resource is not None:
                resources.append(resource)

        if not resources:
            raise ResourceLoadError(
                f"Can't find bundle for base name {bundle_name}, locale {locale!s}",
                details={
                    "bundle": bundle_name,
                    "locale": str(locale),
                    "search_path": [str(p) for p in self._search_path],
                },
            )

        # Least specific first, so more specific files override
        table: dict[str, str] = {}
        for resource in reversed(resources):
            try:
                table.update(read_properties(resource))
            except (OSError, UnicodeDecodeError, configparser.Error) as e:
                raise ResourceLoadError(
                    f"Failed to read language file {resource}: {e}",
                    details={"bundle": bundle_name, "path": str(resource)},
                ) from e

        logger.debug(
            f"Loaded {len(table)} strings for {bundle_name} ({locale!s}) "
            f"from {len(resources)} file(s)"
        )
        return table

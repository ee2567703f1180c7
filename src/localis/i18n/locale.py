"""
Locale value type and language file name parsing.

Language resource files are named after the locale they hold:

    language.properties              -> default (root) locale
    language_fr.properties           -> ("fr", "", "")
    language_fr_CA.properties        -> ("fr", "CA", "")
    language_fr_CA_QC.properties     -> ("fr", "CA", "QC")
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

# Keys of the locale components in the config file
LANGUAGE_KEY = "Language"
COUNTRY_KEY = "Country"
VARIANT_KEY = "Variant"

LANGUAGE_FILE_PREFIX = "language"
LANGUAGE_FILE_SUFFIX = ".properties"

_PART = r"(?P<{}>[a-zA-Z]{{2}})"

# A variant cannot appear without a country, nor a country without a language
LANGUAGE_FILE_PATTERN = re.compile(
    r"{prefix}(?:_{language}(?:_{country}(?:_{variant})?)?)?{suffix}".format(
        prefix=LANGUAGE_FILE_PREFIX,
        language=_PART.format("language"),
        country=_PART.format("country"),
        variant=_PART.format("variant"),
        suffix=re.escape(LANGUAGE_FILE_SUFFIX),
    )
)

_COMPONENT_PATTERN = re.compile(r"(?:[a-zA-Z]{2})?")
_TAG_PATTERN = re.compile(
    r"(?P<language>[a-zA-Z]{2})(?:[_-](?P<country>[a-zA-Z]{2})(?:[_-](?P<variant>[a-zA-Z]{2}))?)?"
)


@dataclass(frozen=True)
class Locale:
    """
    A (language, country, variant) triple. Empty components are allowed.

    The language is stored in lower case and the country in upper case,
    so "FR_ca" and "fr_CA" name the same locale. The variant is kept as written.
    """

    language: str = ""
    country: str = ""
    variant: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.language, str):
            object.__setattr__(self, "language", self.language.lower())
        if isinstance(self.country, str):
            object.__setattr__(self, "country", self.country.upper())

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> Locale:
        """Build a locale from the Language/Country/Variant entries of a mapping."""
        return cls(
            properties.get(LANGUAGE_KEY) or "",
            properties.get(COUNTRY_KEY) or "",
            properties.get(VARIANT_KEY) or "",
        )

    @classmethod
    def parse(cls, tag: str) -> Locale:
        """
        Parse a locale tag such as "fr", "fr_CA" or "fr-CA-QC".

        Args:
            tag: Locale tag with "_" or "-" separators

        Returns:
            The parsed locale

        Raises:
            ValueError: If the tag is not made of two-letter components
        """
        match = _TAG_PATTERN.fullmatch(tag.strip())
        if match is None:
            raise ValueError(f"Invalid locale tag: {tag!r}")
        return cls(*(match.group(name) or "" for name in ("language", "country", "variant")))

    def to_properties(self) -> dict[str, str]:
        """Return the config file entries describing this locale."""
        return {
            LANGUAGE_KEY: self.language,
            COUNTRY_KEY: self.country,
            VARIANT_KEY: self.variant,
        }

    @property
    def is_root(self) -> bool:
        """True for the default locale with every component empty."""
        return not (self.language or self.country or self.variant)

    def is_valid(self) -> bool:
        """Check that components are empty or two letters, with no gaps."""
        parts = (self.language, self.country, self.variant)
        if not all(isinstance(p, str) and _COMPONENT_PATTERN.fullmatch(p) for p in parts):
            return False
        # ("", "CA", "") or ("fr", "", "QC") cannot be named by a language file
        if not self.language and (self.country or self.variant):
            return False
        return bool(self.country) or not self.variant

    def candidates(self) -> list[Locale]:
        """
        Resource lookup chain, most specific first, ending with the root locale.

        ("fr", "CA", "QC") -> fr_CA_QC, fr_CA, fr, root
        """
        chain = [
            Locale(self.language, self.country, self.variant),
            Locale(self.language, self.country),
            Locale(self.language),
            Locale(),
        ]
        result: list[Locale] = []
        for locale in chain:
            if locale not in result:
                result.append(locale)
        return result

    def file_suffix(self) -> str:
        """Suffix appended to a bundle base name ("" for the root locale)."""
        return "".join(f"_{p}" for p in (self.language, self.country, self.variant) if p)

    def __str__(self) -> str:
        return self.file_suffix().lstrip("_")


# Default locale, every component empty
ROOT_LOCALE = Locale()


def is_language_file(filename: str) -> bool:
    """Check whether a file name looks like a language resource file."""
    return filename.startswith(LANGUAGE_FILE_PREFIX) and filename.endswith(LANGUAGE_FILE_SUFFIX)


def parse_language_filename(filename: str) -> Locale | None:
    """
    Extract the locale encoded in a language file name.

    Args:
        filename: File name such as "language_fr_CA.properties"

    Returns:
        The locale, or None if the name does not follow the naming scheme
    """
    match = LANGUAGE_FILE_PATTERN.fullmatch(filename)
    if match is None:
        return None
    return Locale(
        match.group("language") or "",
        match.group("country") or "",
        match.group("variant") or "",
    )

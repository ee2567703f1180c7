"""
Localis Internationalization (i18n) System.

Loads the strings of the selected locale and persists locale changes.
"""

from localis.i18n.bundle import BUNDLE_NAME, PropertiesBundleLoader, StringTableLoader
from localis.i18n.exceptions import (
    ConfigurationError,
    LocalisationError,
    LocalisationErrorCode,
    NotConfiguredError,
    ResourceLoadError,
)
from localis.i18n.locale import Locale, parse_language_filename
from localis.i18n.selection import LocaleRequirement
from localis.i18n.store import (
    ConfigLoadResult,
    LocaleConfigStore,
    configure,
    configure_unsafe,
    get_bundle_name,
    get_config_file,
    get_language_requirement,
    get_languages_directory,
    get_store,
    get_string,
    is_configured,
    list_available_locales,
    select_locale,
    update_language,
)

__all__ = [
    # Store
    "LocaleConfigStore",
    "ConfigLoadResult",
    "configure",
    "configure_unsafe",
    "get_store",
    "is_configured",
    "get_string",
    "get_config_file",
    "get_languages_directory",
    "get_bundle_name",
    "list_available_locales",
    "get_language_requirement",
    "select_locale",
    "update_language",
    # Locales
    "Locale",
    "LocaleRequirement",
    "parse_language_filename",
    # Loading
    "BUNDLE_NAME",
    "StringTableLoader",
    "PropertiesBundleLoader",
    # Exceptions
    "LocalisationError",
    "LocalisationErrorCode",
    "ConfigurationError",
    "NotConfiguredError",
    "ResourceLoadError",
]

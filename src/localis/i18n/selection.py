"""
Selection of a locale among the available ones.

A LocaleRequirement lists the options a UI can present and records the
one the user picked. It is then handed back to the store, which
persists the choice.
"""

from __future__ import annotations

from collections.abc import Iterable

from localis.i18n.locale import Locale

# Key under which the choice is presented
LANGUAGE_REQUIREMENT_KEY = "Language"


class LocaleRequirement:
    """Single-choice selection over a fixed list of locales."""

    def __init__(self, options: Iterable[Locale], key: str = LANGUAGE_REQUIREMENT_KEY) -> None:
        self.key = key
        self._options = list(options)
        self._value: Locale | None = None

        if not self._options:
            raise ValueError("A locale requirement needs at least one option")

    @property
    def options(self) -> list[Locale]:
        """Locales that may be chosen."""
        return list(self._options)

    @property
    def fulfilled(self) -> bool:
        """True once a value has been chosen."""
        return self._value is not None

    @property
    def value(self) -> Locale | None:
        """The chosen locale, or None."""
        return self._value

    def fulfil(self, value: Locale) -> None:
        """
        Choose one of the options.

        Raises:
            ValueError: If value is not one of the options
        """
        if value not in self._options:
            raise ValueError(f"{value!s} is not an available option for '{self.key}'")
        self._value = value

    def reset(self) -> None:
        """Clear the chosen value."""
        self._value = None

    def __repr__(self) -> str:
        options = ", ".join(str(o) or "<default>" for o in self._options)
        return f"<LocaleRequirement(key={self.key}, options=[{options}], value={self._value})>"

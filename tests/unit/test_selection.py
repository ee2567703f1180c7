"""Unit tests for LocaleRequirement."""

import pytest

from localis.i18n.locale import Locale
from localis.i18n.selection import LocaleRequirement


class TestLocaleRequirement:
    """Tests for locale selection options."""

    def test_initial_state(self) -> None:
        """A new requirement lists its options and has no value."""
        requirement = LocaleRequirement([Locale(), Locale("fr")])

        assert requirement.key == "Language"
        assert requirement.options == [Locale(), Locale("fr")]
        assert requirement.fulfilled is False
        assert requirement.value is None

    def test_empty_options_rejected(self) -> None:
        """A requirement needs options."""
        with pytest.raises(ValueError):
            LocaleRequirement([])

    def test_fulfil(self) -> None:
        """Choosing an option fulfils the requirement."""
        requirement = LocaleRequirement([Locale(), Locale("fr")])

        requirement.fulfil(Locale("fr"))

        assert requirement.fulfilled is True
        assert requirement.value == Locale("fr")

    def test_fulfil_unknown_option(self) -> None:
        """Only listed options may be chosen."""
        requirement = LocaleRequirement([Locale("fr")])

        with pytest.raises(ValueError, match="not an available option"):
            requirement.fulfil(Locale("de"))
        assert requirement.fulfilled is False

    def test_reset(self) -> None:
        """reset() clears the choice."""
        requirement = LocaleRequirement([Locale("fr")])
        requirement.fulfil(Locale("fr"))

        requirement.reset()

        assert requirement.fulfilled is False

    def test_options_are_copied(self) -> None:
        """Changing the returned options does not change the requirement."""
        requirement = LocaleRequirement([Locale("fr")])
        requirement.options.append(Locale("de"))

        assert requirement.options == [Locale("fr")]

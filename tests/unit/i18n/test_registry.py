"""Tests for i18nkit.i18n.registry module."""

from unittest.mock import patch

import pytest

from i18nkit.i18n import (
    ConstructionError,
    DefaultLocaleError,
    DocumentFormat,
    DuplicateLocaleError,
    I18n,
    I18nOptions,
    LocaleDocumentError,
    LocaleOptions,
    LocaleRegistry,
    Node,
)
from tests.factories.i18n import make_i18n_options, make_locale_options


class TestLocaleRegistryBuild:
    """Tests for LocaleRegistry.build()."""

    def test_build_valid_registry(self):
        """build() parses every locale in order."""
        registry = LocaleRegistry.build(make_i18n_options())
        assert registry.available_locales == ("en", "tr")
        assert registry.default_locale == "en"
        assert all(isinstance(entry.data, Node) for entry in registry.entries)

    def test_default_separator(self):
        """build() falls back to "." without a separator."""
        assert LocaleRegistry.build(make_i18n_options()).separator == "."
        assert LocaleRegistry.build(make_i18n_options(separator="")).separator == "."

    def test_custom_separator(self):
        """build() keeps a custom separator."""
        registry = LocaleRegistry.build(make_i18n_options(separator="::"))
        assert registry.separator == "::"

    def test_malformed_document(self):
        """build() rejects malformed documents naming the locale."""
        options = I18nOptions(
            default_locale="en",
            locales=[
                make_locale_options("en"),
                LocaleOptions("tr", b'{"pages": '),
            ],
        )
        with pytest.raises(LocaleDocumentError) as exc_info:
            LocaleRegistry.build(options)

        error = exc_info.value
        assert error.locale == "tr"
        assert str(error).startswith("error parsing document for locale 'tr': ")
        assert error.__cause__ is not None

    def test_non_object_root(self):
        """build() rejects documents whose root is not an object."""
        options = I18nOptions(
            default_locale="en", locales=[LocaleOptions("en", b'["a", "b"]')]
        )
        with pytest.raises(LocaleDocumentError, match="locale 'en'"):
            LocaleRegistry.build(options)

    def test_recursive_yaml_document(self):
        """build() wraps a self-referencing YAML document with its locale."""
        options = I18nOptions(
            default_locale="en",
            locales=[
                make_locale_options("en"),
                LocaleOptions("tr", b"a: &x\n  b: *x\n", DocumentFormat.YAML),
            ],
        )
        with pytest.raises(LocaleDocumentError) as exc_info:
            LocaleRegistry.build(options)
        assert exc_info.value.locale == "tr"
        assert "cyclic reference" in str(exc_info.value)

    def test_unknown_document_format(self):
        """build() wraps an unknown document format with its locale."""
        options = I18nOptions(
            default_locale="en",
            locales=[make_locale_options("en"), LocaleOptions("tr", b"a = 1", "toml")],
        )
        with pytest.raises(LocaleDocumentError, match="locale 'tr'"):
            LocaleRegistry.build(options)

    def test_duplicate_locale(self):
        """build() rejects a locale registered twice."""
        options = I18nOptions(
            default_locale="en",
            locales=[make_locale_options("en"), make_locale_options("en")],
        )
        with pytest.raises(DuplicateLocaleError) as exc_info:
            LocaleRegistry.build(options)
        assert str(exc_info.value) == "locale 'en' is defined more than once"
        assert exc_info.value.locale == "en"

    def test_parse_error_reported_before_duplicate(self):
        """A malformed duplicate is reported as a parse error."""
        options = I18nOptions(
            default_locale="en",
            locales=[make_locale_options("en"), LocaleOptions("en", b"{")],
        )
        with pytest.raises(LocaleDocumentError):
            LocaleRegistry.build(options)

    def test_missing_default_locale(self):
        """build() rejects a default locale that is not registered."""
        options = make_i18n_options(default_locale="fr")
        with pytest.raises(DefaultLocaleError) as exc_info:
            LocaleRegistry.build(options)
        assert str(exc_info.value) == "default locale 'fr' is not defined"

    def test_no_locales(self):
        """build() rejects an empty locale list."""
        with pytest.raises(DefaultLocaleError):
            LocaleRegistry.build(I18nOptions(default_locale="en"))

    def test_construction_errors_are_value_errors(self):
        """Construction errors share a ValueError base."""
        with pytest.raises(ValueError):
            I18n(make_i18n_options(default_locale="fr"))
        assert issubclass(DuplicateLocaleError, ConstructionError)

    def test_locale_ids_are_opaque(self):
        """Identifiers differing only by case are distinct locales."""
        registry = LocaleRegistry.build(
            I18nOptions(
                default_locale="EN",
                locales=[make_locale_options("en"), make_locale_options("EN")],
            )
        )
        assert registry.available_locales == ("en", "EN")
        assert registry.default_entry.locale == "EN"

    def test_debug_traces(self):
        """Debug mode logs validation failures and the final registry."""
        with patch("i18nkit.i18n.registry.logger") as mock_logger:
            with pytest.raises(DefaultLocaleError):
                LocaleRegistry.build(make_i18n_options(default_locale="fr", debug=True))
            LocaleRegistry.build(make_i18n_options(debug=True))

        mock_logger.debug.assert_any_call("default_locale_not_defined", locale="fr")
        mock_logger.debug.assert_any_call(
            "registry_built",
            default_locale="en",
            available_locales=["en", "tr"],
            separator=".",
        )

    def test_no_traces_without_debug(self):
        """Validation failures are not logged outside debug mode."""
        with patch("i18nkit.i18n.registry.logger") as mock_logger:
            with pytest.raises(DefaultLocaleError):
                LocaleRegistry.build(make_i18n_options(default_locale="fr"))
        mock_logger.debug.assert_not_called()


class TestLocaleRegistryLookup:
    """Tests for registry lookups."""

    @pytest.fixture
    def registry(self):
        return LocaleRegistry.build(make_i18n_options())

    def test_find(self, registry):
        """find() returns the entry for a locale."""
        assert registry.find("tr").locale == "tr"

    def test_find_missing(self, registry):
        """find() returns None for unknown locales."""
        assert registry.find("fr") is None

    def test_registry_is_frozen(self, registry):
        """Registry attributes cannot be reassigned."""
        with pytest.raises(AttributeError):
            registry.default_locale = "tr"

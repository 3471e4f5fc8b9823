"""Validated, immutable set of locale entries.

The registry is built once from I18nOptions and never changes afterwards.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from i18nkit.core.logging import get_module_logger
from i18nkit.i18n.errors import (
    DefaultLocaleError,
    DuplicateLocaleError,
    LocaleDocumentError,
)
from i18nkit.i18n.models import I18nOptions, LocaleEntry
from i18nkit.i18n.parsers import DocumentParseError, parse_document

logger = get_module_logger()

DEFAULT_SEPARATOR = "."


@dataclass(frozen=True)
class LocaleRegistry:
    """Registered locales, default locale and separator configuration.

    Attributes:
        entries: Locale entries in registration order.
        default_locale: Identifier of the locale selected after construction.
        separator: Separator used to split paths and scopes.
        debug: Whether trace lines are emitted.
    """

    entries: Tuple[LocaleEntry, ...]
    default_locale: str
    separator: str = DEFAULT_SEPARATOR
    debug: bool = False

    @classmethod
    def build(cls, options: I18nOptions) -> "LocaleRegistry":
        """Parse and validate locale documents into a registry.

        Args:
            options: Construction options.

        Returns:
            A validated LocaleRegistry.

        Raises:
            LocaleDocumentError: If a document is malformed.
            DuplicateLocaleError: If a locale identifier appears twice.
            DefaultLocaleError: If the default locale is not registered.
        """
        debug = options.debug
        entries = []
        seen = set()

        for locale_options in options.locales:
            locale = locale_options.locale
            try:
                data = parse_document(locale_options.document, locale_options.format)
            except DocumentParseError as e:
                if debug:
                    logger.debug(
                        "locale_document_parse_failed", locale=locale, error=str(e)
                    )
                raise LocaleDocumentError(locale, e) from e

            if locale in seen:
                if debug:
                    logger.debug("locale_defined_more_than_once", locale=locale)
                raise DuplicateLocaleError(locale)

            seen.add(locale)
            entries.append(LocaleEntry(locale=locale, data=data))

        if options.default_locale not in seen:
            if debug:
                logger.debug(
                    "default_locale_not_defined", locale=options.default_locale
                )
            raise DefaultLocaleError(options.default_locale)

        registry = cls(
            entries=tuple(entries),
            default_locale=options.default_locale,
            separator=options.separator or DEFAULT_SEPARATOR,
            debug=debug,
        )

        if debug:
            logger.debug(
                "registry_built",
                default_locale=registry.default_locale,
                available_locales=list(registry.available_locales),
                separator=registry.separator,
            )

        return registry

    @property
    def available_locales(self) -> Tuple[str, ...]:
        """Registered locale identifiers in registration order."""
        return tuple(entry.locale for entry in self.entries)

    def find(self, locale: str) -> Optional[LocaleEntry]:
        """Return the first entry with the given identifier, or None."""
        for entry in self.entries:
            if entry.locale == locale:
                return entry
        return None

    @property
    def default_entry(self) -> LocaleEntry:
        entry = self.find(self.default_locale)
        if entry is None:
            raise DefaultLocaleError(self.default_locale)
        return entry

"""i18nkit - nested-key translation lookups with locale switching."""

from i18nkit.i18n import (
    ConstructionError,
    DefaultLocaleError,
    DocumentFormat,
    DuplicateLocaleError,
    I18n,
    I18nError,
    I18nOptions,
    LocaleDocumentError,
    LocaleOptions,
    LocaleUnavailableError,
    create_i18n,
)

__version__ = "0.1.0"

__all__ = [
    "I18n",
    "I18nOptions",
    "LocaleOptions",
    "DocumentFormat",
    "create_i18n",
    "I18nError",
    "ConstructionError",
    "LocaleDocumentError",
    "DuplicateLocaleError",
    "DefaultLocaleError",
    "LocaleUnavailableError",
]

"""Exceptions raised by the i18n system."""

from typing import Optional


class I18nError(Exception):
    """Base class for all i18n errors."""


class ConstructionError(I18nError, ValueError):
    """Raised when a translation registry cannot be built.

    Attributes:
        locale: Locale identifier the failure relates to.
    """

    def __init__(self, message: str, locale: Optional[str] = None):
        super().__init__(message)
        self.locale = locale


class LocaleDocumentError(ConstructionError):
    """Raised when a locale document cannot be parsed into a tree."""

    def __init__(self, locale: str, cause: object):
        super().__init__(
            f"error parsing document for locale '{locale}': {cause}", locale=locale
        )
        self.cause = cause


class DuplicateLocaleError(ConstructionError):
    """Raised when the same locale identifier is registered twice."""

    def __init__(self, locale: str):
        super().__init__(f"locale '{locale}' is defined more than once", locale=locale)


class DefaultLocaleError(ConstructionError):
    """Raised when the default locale is not among the registered locales."""

    def __init__(self, locale: str):
        super().__init__(f"default locale '{locale}' is not defined", locale=locale)


class LocaleUnavailableError(I18nError, LookupError):
    """Raised when switching to a locale that is not registered.

    Attributes:
        locale: The requested locale identifier.
    """

    def __init__(self, locale: str):
        super().__init__(f"locale '{locale}' is not available")
        self.locale = locale

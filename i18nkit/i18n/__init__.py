"""i18n system - translation lookups over nested locale documents.

Resolves separator-delimited paths against locale trees, with a switchable
active locale, per-call locale override, scope prefixes and {{variable}}
interpolation.

Main components:
- models: Leaf, Node, LocaleEntry, LocaleOptions, I18nOptions
- registry: LocaleRegistry built and validated once
- translator: Translator resolving paths and interpolating variables
- switch: LocaleSwitch holding the active locale
- service: I18n, the public facade
- loader/factory: building an I18n from a locales directory and settings
"""

from i18nkit.i18n.errors import (
    ConstructionError,
    DefaultLocaleError,
    DuplicateLocaleError,
    I18nError,
    LocaleDocumentError,
    LocaleUnavailableError,
)
from i18nkit.i18n.factory import create_i18n
from i18nkit.i18n.loader import LocaleDirectoryLoader
from i18nkit.i18n.models import (
    DocumentFormat,
    I18nOptions,
    Leaf,
    LocaleEntry,
    LocaleOptions,
    Node,
    TreeValue,
)
from i18nkit.i18n.registry import LocaleRegistry
from i18nkit.i18n.service import I18n
from i18nkit.i18n.switch import LocaleSwitch
from i18nkit.i18n.translator import Translator

__all__ = [
    "I18n",
    "I18nOptions",
    "LocaleOptions",
    "DocumentFormat",
    "Leaf",
    "Node",
    "TreeValue",
    "LocaleEntry",
    "LocaleRegistry",
    "LocaleSwitch",
    "Translator",
    "LocaleDirectoryLoader",
    "create_i18n",
    "I18nError",
    "ConstructionError",
    "LocaleDocumentError",
    "DuplicateLocaleError",
    "DefaultLocaleError",
    "LocaleUnavailableError",
]

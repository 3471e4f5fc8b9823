"""Translation service.

Provides the runtime surface of the i18n system: translation lookups, locale
switching and change notification over a validated registry.
"""

from typing import Any, Optional, Tuple

from i18nkit.core.logging import get_module_logger
from i18nkit.i18n.models import I18nOptions
from i18nkit.i18n.registry import LocaleRegistry
from i18nkit.i18n.switch import LocaleChangeHook, LocaleSwitch
from i18nkit.i18n.translator import Translator

logger = get_module_logger()


class I18n:
    """Translation lookups over a fixed set of locales.

    The registry is validated once at construction. Afterwards only the
    active locale changes, through change_locale().

    Usage:
        i18n = I18n(
            I18nOptions(
                default_locale="en",
                locales=[
                    LocaleOptions("en", en_json),
                    LocaleOptions("tr", tr_json),
                ],
            )
        )

        i18n.t("pages.home.title")
        i18n.t("title", scope="pages.home", locale="tr")
        i18n.t("pages.home.welcome", name="Ada")

        i18n.change_locale("tr")
    """

    def __init__(
        self,
        options: I18nOptions,
        on_locale_change: Optional[LocaleChangeHook] = None,
    ):
        """Build and validate the registry.

        Args:
            options: Construction options.
            on_locale_change: Optional callback receiving the new locale
                identifier after each effective change.

        Raises:
            ConstructionError: If a document is malformed, a locale is
                duplicated or the default locale is missing.
        """
        self._registry = LocaleRegistry.build(options)
        self._switch = LocaleSwitch(self._registry, on_change=on_locale_change)
        self._translator = Translator(self._registry, self._switch)
        logger.info(
            "initialized_i18n",
            default_locale=self._registry.default_locale,
            locale_count=len(self._registry.entries),
        )

    @classmethod
    def new(
        cls,
        default_locale: str,
        locales: list,
        separator: Optional[str] = None,
        debug: bool = False,
        on_locale_change: Optional[LocaleChangeHook] = None,
    ) -> "I18n":
        """Build an instance from keyword arguments instead of I18nOptions."""
        return cls(
            I18nOptions(
                default_locale=default_locale,
                locales=list(locales),
                separator=separator,
                debug=debug,
            ),
            on_locale_change=on_locale_change,
        )

    def translate(
        self,
        path: str,
        /,
        *,
        scope: Optional[str] = None,
        locale: Optional[str] = None,
        **variables: Any,
    ) -> str:
        """Retrieve and interpolate a translated message.

        Args:
            path: Separator-joined key path.
            scope: Optional path prefix.
            locale: Optional locale used for this call only.
            **variables: Values for {{name}} placeholders.

        Returns:
            Translated message, or a diagnostic string if the path does not
            resolve.
        """
        return self._translator.translate(path, scope, locale, variables)

    t = translate

    def has_translation(
        self,
        path: str,
        /,
        *,
        scope: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> bool:
        """Check if a path resolves to a translation."""
        return self._translator.has_translation(path, scope, locale)

    def change_locale(self, locale: str) -> None:
        """Make another registered locale the active one.

        Raises:
            LocaleUnavailableError: If the locale is not registered.
        """
        self._switch.change(locale)

    def current_locale(self) -> str:
        return self._switch.current_locale()

    def available_locales(self) -> Tuple[str, ...]:
        return self._registry.available_locales

    def on_locale_change(
        self, callback: Optional[LocaleChangeHook]
    ) -> Optional[LocaleChangeHook]:
        """Register the locale change callback (None clears it).

        Returns the callback, so the method also works as a decorator:

            @i18n.on_locale_change
            def reload_menus(locale):
                ...
        """
        self._switch.set_hook(callback)
        return callback

    @property
    def default_locale(self) -> str:
        return self._registry.default_locale

    @property
    def separator(self) -> str:
        return self._registry.separator

    @property
    def debug(self) -> bool:
        return self._registry.debug

    @property
    def registry(self) -> LocaleRegistry:
        return self._registry

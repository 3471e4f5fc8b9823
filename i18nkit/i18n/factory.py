"""Factory functions for creating i18n components.

Builds a ready-to-use I18n instance from settings and a locales directory.
"""

from pathlib import Path
from typing import Optional

import structlog

from i18nkit.core.config import I18nSettings, settings as default_settings
from i18nkit.i18n.loader import LocaleDirectoryLoader
from i18nkit.i18n.models import I18nOptions
from i18nkit.i18n.service import I18n
from i18nkit.i18n.switch import LocaleChangeHook

logger = structlog.get_logger()


def create_i18n(
    i18n_settings: Optional[I18nSettings] = None,
    locales_dir: Optional[Path] = None,
    default_locale: Optional[str] = None,
    on_locale_change: Optional[LocaleChangeHook] = None,
) -> I18n:
    """Create an I18n instance from configuration.

    Explicit arguments win over settings; settings default to the
    I18N_* environment variables.

    Args:
        i18n_settings: Settings to use (default: global settings.i18n).
        locales_dir: Directory with locale documents (default:
            I18N_LOCALES_DIR).
        default_locale: Default locale (default: I18N_DEFAULT_LOCALE).
        on_locale_change: Optional locale change callback.

    Returns:
        I18n: Configured instance.

    Raises:
        ValueError: If no locales directory is configured or it is missing.
        ConstructionError: If the locale documents fail validation.

    Usage:
        # Use I18N_* environment variables
        i18n = create_i18n()

        # Custom directory
        i18n = create_i18n(locales_dir=Path("/srv/app/locales"))
    """
    cfg = i18n_settings or default_settings.i18n
    directory = locales_dir or cfg.LOCALES_DIR
    if not directory:
        raise ValueError("No locales directory configured (set I18N_LOCALES_DIR)")

    loader = LocaleDirectoryLoader(Path(directory))
    i18n = I18n(
        I18nOptions(
            default_locale=default_locale or cfg.DEFAULT_LOCALE,
            locales=loader.load_options(),
            separator=cfg.SEPARATOR,
            debug=cfg.DEBUG,
        ),
        on_locale_change=on_locale_change,
    )

    logger.info(
        "i18n_created",
        locales_dir=str(directory),
        default_locale=i18n.default_locale,
        locale_count=len(i18n.available_locales()),
    )
    return i18n

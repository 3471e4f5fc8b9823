"""Current-locale cursor with guarded switching.

The cursor is the only mutable state of a translation instance. Readers take
the read side of a ReadWriteLock, switches take the write side.
"""

from typing import Callable, Optional

from i18nkit.core.locks import ReadWriteLock
from i18nkit.core.logging import get_module_logger
from i18nkit.i18n.errors import LocaleUnavailableError
from i18nkit.i18n.models import LocaleEntry
from i18nkit.i18n.registry import LocaleRegistry

logger = get_module_logger()

LocaleChangeHook = Callable[[str], None]


class LocaleSwitch:
    """Mutable pointer to the active locale entry of a registry.

    Attributes:
        registry: The registry the cursor moves over.
        _current: Entry currently selected.
        _hook: Optional callback fired after a successful change.
        _lock: ReadWriteLock guarding the cursor and the hook slot.
    """

    def __init__(
        self,
        registry: LocaleRegistry,
        on_change: Optional[LocaleChangeHook] = None,
    ):
        self.registry = registry
        self._current: LocaleEntry = registry.default_entry
        self._hook = on_change
        self._lock = ReadWriteLock()

    def current(self) -> LocaleEntry:
        """Return the active entry."""
        with self._lock.read_locked():
            return self._current

    def current_locale(self) -> str:
        """Return the active locale identifier."""
        return self.current().locale

    def set_hook(self, hook: Optional[LocaleChangeHook]) -> None:
        """Register the change hook, replacing any previous one."""
        with self._lock.write_locked():
            self._hook = hook

    def change(self, locale: str) -> None:
        """Move the cursor to another registered locale.

        Switching to the already active locale is a no-op and does not fire
        the hook. The hook runs synchronously on this thread after the
        cursor has been updated, while the write lock is still held.

        Args:
            locale: Target locale identifier.

        Raises:
            LocaleUnavailableError: If the locale is not registered. The
                cursor is left unchanged.
        """
        debug = self.registry.debug

        with self._lock.write_locked():
            entry = self.registry.find(locale)
            if entry is None:
                if debug:
                    logger.debug("locale_not_available", locale=locale)
                raise LocaleUnavailableError(locale)

            if self._current.locale == locale:
                return

            previous = self._current.locale
            self._current = entry

            if self._hook is not None:
                self._hook(locale)

            if debug:
                logger.debug(
                    "locale_changed", previous_locale=previous, locale=locale
                )

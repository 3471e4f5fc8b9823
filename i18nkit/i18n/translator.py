"""Translation resolution with scoping and variable interpolation.

Core component of the i18n system: composes scope and path segments, walks a
locale's translation tree and interpolates {{variable}} placeholders.
Resolution never raises; failures come back as diagnostic strings.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from i18nkit.core.logging import get_module_logger
from i18nkit.i18n.models import LocaleEntry, Node, TreeValue, render_value
from i18nkit.i18n.registry import LocaleRegistry
from i18nkit.i18n.switch import LocaleSwitch

logger = get_module_logger()

RESERVED_OPTIONS = ("scope", "locale")


@dataclass
class ResolutionContext:
    """Per-call resolution input.

    Attributes:
        keys: Scope segments followed by path segments.
        requested_locale: Locale reported in diagnostics.
        entry: Entry whose tree is traversed.
        variables: Substitution values keyed by placeholder name.
    """

    keys: List[str]
    requested_locale: str
    entry: LocaleEntry
    variables: Dict[str, Any] = field(default_factory=dict)


class Translator:
    """Resolves translation paths against a registry.

    Attributes:
        registry: The LocaleRegistry holding all locale trees.
        switch: LocaleSwitch providing the active locale.
    """

    def __init__(self, registry: LocaleRegistry, switch: LocaleSwitch):
        self.registry = registry
        self.switch = switch

    @property
    def separator(self) -> str:
        return self.registry.separator

    def split(self, value: str) -> List[str]:
        """Split a path or scope on the separator; "" has no segments."""
        if not value:
            return []
        return value.split(self.separator)

    def compose(self, path: str, scope: Optional[str] = None) -> List[str]:
        """Prepend scope segments to path segments.

        Inside a scope the path keeps its empty segments, so the result is
        always the split of scope + separator + path.

        Example:
            compose("c", scope="a.b") -> ["a", "b", "c"]
            compose("", scope="a.b") -> ["a", "b", ""]
        """
        if isinstance(scope, str) and scope:
            return self.split(scope) + path.split(self.separator)
        return self.split(path)

    def _select(self, locale: Optional[str]) -> Tuple[str, LocaleEntry]:
        """Pick the locale reported in diagnostics and the tree to walk.

        An explicit locale that is not registered still falls back to the
        active tree, but keeps the requested identifier for diagnostics.
        """
        current = self.switch.current()
        if locale is None:
            return current.locale, current

        entry = self.registry.find(locale)
        if entry is None:
            if self.registry.debug:
                logger.debug(
                    "requested_locale_not_registered",
                    requested_locale=locale,
                    active_locale=current.locale,
                )
            return locale, current
        return locale, entry

    def context(
        self,
        path: str,
        scope: Optional[str] = None,
        locale: Optional[str] = None,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> ResolutionContext:
        requested_locale, entry = self._select(locale)
        return ResolutionContext(
            keys=self.compose(path, scope),
            requested_locale=requested_locale,
            entry=entry,
            variables={
                name: value
                for name, value in (variables or {}).items()
                if name not in RESERVED_OPTIONS
            },
        )

    def lookup(self, keys: List[str], root: Node) -> Optional[TreeValue]:
        """Walk the tree segment by segment; None when any step is missing."""
        current: TreeValue = root
        for key in keys:
            if not isinstance(current, Node) or key not in current:
                return None
            current = current.children[key]
        return current

    def resolve(self, ctx: ResolutionContext) -> str:
        joined = self.separator.join(ctx.keys)

        if not ctx.keys:
            if self.registry.debug:
                logger.debug(
                    "invalid_path", locale=ctx.requested_locale, path=joined
                )
            return f"invalid path '{joined}'"

        value = self.lookup(ctx.keys, ctx.entry.data)
        if value is None:
            if self.registry.debug:
                logger.debug(
                    "missing_translation", locale=ctx.requested_locale, path=joined
                )
            return f"missing translation for path '{ctx.requested_locale}.{joined}'"

        return self._interpolate(value.render(), ctx.variables)

    def translate(
        self,
        path: str,
        scope: Optional[str] = None,
        locale: Optional[str] = None,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Resolve a path and interpolate variables.

        Args:
            path: Separator-joined key path (e.g. "pages.home.title").
            scope: Optional path prefix composed before ``path``.
            locale: Optional locale overriding the active one for this call.
            variables: Values for {{name}} placeholders.

        Returns:
            The translated text, or a diagnostic string when the path is
            empty ("invalid path ...") or does not resolve
            ("missing translation for path ...").
        """
        return self.resolve(self.context(path, scope, locale, variables))

    def has_translation(
        self,
        path: str,
        scope: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> bool:
        """Check whether a path resolves in the target tree."""
        ctx = self.context(path, scope, locale)
        if not ctx.keys:
            return False
        return self.lookup(ctx.keys, ctx.entry.data) is not None

    def _interpolate(self, message: str, variables: Dict[str, Any]) -> str:
        """Replace {{name}} placeholders in a single left-to-right pass.

        Substituted values are never rescanned, and placeholders without a
        matching variable are kept verbatim.
        """
        if not variables:
            return message

        replacements = {
            f"{{{{{name}}}}}": render_value(value) for name, value in variables.items()
        }
        # Longest first so overlapping names match the full placeholder
        pattern = re.compile(
            "|".join(
                re.escape(token)
                for token in sorted(replacements, key=len, reverse=True)
            )
        )
        return pattern.sub(lambda m: replacements[m.group(0)], message)

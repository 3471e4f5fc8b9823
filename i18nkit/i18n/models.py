"""Translation models for the i18n system.

Defines the recursive translation tree, locale entries and the options used
to build a registry.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Union


class DocumentFormat(str, Enum):
    """Structured document formats accepted for locale data."""

    JSON = "json"
    YAML = "yaml"

    @classmethod
    def from_suffix(cls, suffix: str) -> "DocumentFormat":
        """Map a file suffix (e.g. ".json", ".yml") to a DocumentFormat.

        Raises:
            ValueError: If the suffix is not a supported document type.
        """
        normalized = suffix.lower().lstrip(".")
        if normalized == "json":
            return cls.JSON
        if normalized in ("yml", "yaml"):
            return cls.YAML
        raise ValueError(f"Unsupported document suffix: {suffix}")


@dataclass(frozen=True)
class Leaf:
    """Terminal value of a translation tree.

    Holds any parsed value that is not a mapping: strings, numbers,
    booleans, null and lists.
    """

    value: Any

    def render(self) -> str:
        return render_value(self.value)


@dataclass(frozen=True)
class Node:
    """Mapping node of a translation tree.

    Children keep the key order of the source document and are exposed
    through a read-only mapping.
    """

    children: Mapping[str, "TreeValue"] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.children, MappingProxyType):
            object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    def get(self, key: str) -> Optional["TreeValue"]:
        return self.children.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.children

    def to_plain(self) -> dict:
        """Convert the subtree back to plain Python containers."""
        return {key: _to_plain(child) for key, child in self.children.items()}

    def render(self) -> str:
        return render_value(self.to_plain())


TreeValue = Union[Leaf, Node]


def _to_plain(value: TreeValue) -> Any:
    if isinstance(value, Node):
        return value.to_plain()
    return value.value


def build_tree(data: Any) -> TreeValue:
    """Build a TreeValue from parsed document data.

    Mappings become Nodes (keys rendered to text), anything else is a Leaf.

    Args:
        data: Output of a structured-data parser.

    Returns:
        Node for mappings, Leaf otherwise.

    Raises:
        ValueError: If two keys of one mapping render to the same text
            (e.g. YAML `1` and `"1"`).
    """
    if not isinstance(data, Mapping):
        return Leaf(data)

    children = {}
    for key, value in data.items():
        name = key if isinstance(key, str) else render_value(key)
        if name in children:
            raise ValueError(f"duplicate key '{name}' in mapping")
        children[name] = build_tree(value)
    return Node(children)


def render_value(value: Any) -> str:
    """Render a value as locale-agnostic text.

    Strings are returned unchanged, booleans and null use their JSON
    spelling, numbers use ``str()`` and containers are compact JSON.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (Node, Leaf)):
        return value.render()
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(
            value, ensure_ascii=False, separators=(",", ":"), default=str
        )
    return str(value)


@dataclass(frozen=True)
class LocaleEntry:
    """A locale identifier paired with its translation tree.

    Attributes:
        locale: Opaque locale identifier (e.g. "en", "tr"). Compared exactly,
            never case-folded or canonicalized.
        data: Root Node of the locale's translations.
    """

    locale: str
    data: Node


@dataclass(frozen=True)
class LocaleOptions:
    """Construction input for a single locale.

    Attributes:
        locale: Locale identifier.
        document: Raw structured document (bytes or text).
        format: Parser to use for the document.
    """

    locale: str
    document: Union[bytes, str]
    format: DocumentFormat = DocumentFormat.JSON


@dataclass
class I18nOptions:
    """Construction input for a translation registry.

    Attributes:
        default_locale: Locale selected after construction.
        locales: Locale documents in registration order.
        separator: Path separator. None or "" mean ".".
        debug: Emit trace lines for validation and resolution failures.
    """

    default_locale: str
    locales: List[LocaleOptions] = field(default_factory=list)
    separator: Optional[str] = "."
    debug: bool = False

"""Document parsing for locale data.

Turns raw locale documents into translation trees using the standard JSON
decoder or PyYAML's safe loader.
"""

import json
from typing import Any, FrozenSet, Union

import yaml

from i18nkit.i18n.models import DocumentFormat, Node, build_tree


class DocumentParseError(ValueError):
    """Raised when a document is malformed or its root is not a mapping."""


def _decode(document: Union[bytes, str], fmt: DocumentFormat) -> Any:
    if fmt == DocumentFormat.YAML:
        try:
            return yaml.safe_load(document)
        except yaml.YAMLError as e:
            raise DocumentParseError(str(e)) from e

    try:
        return json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DocumentParseError(str(e)) from e


def _ensure_acyclic(data: Any, ancestors: FrozenSet[int] = frozenset()) -> None:
    """Reject containers that contain themselves (YAML recursive aliases).

    Shared, non-recursive aliases are fine: only the current walk path is
    tracked.
    """
    if not isinstance(data, (dict, list)):
        return
    if id(data) in ancestors:
        raise DocumentParseError("document contains a cyclic reference")

    ancestors = ancestors | {id(data)}
    for child in data.values() if isinstance(data, dict) else data:
        _ensure_acyclic(child, ancestors)


def parse_document(
    document: Union[bytes, str],
    fmt: Union[DocumentFormat, str] = DocumentFormat.JSON,
) -> Node:
    """Parse a structured document into a root Node.

    Args:
        document: Raw document, bytes or text.
        fmt: Format of the document.

    Returns:
        Root Node of the translation tree.

    Raises:
        DocumentParseError: If the format is unknown, the document cannot be
            decoded, its root is not a mapping, it refers to itself or two
            keys of one mapping render to the same text.
    """
    try:
        fmt = DocumentFormat(fmt)
    except ValueError as e:
        raise DocumentParseError(f"unsupported document format '{fmt}'") from e

    try:
        data = _decode(document, fmt)
        if not isinstance(data, dict):
            raise DocumentParseError(
                f"document root must be an object, got {type(data).__name__}"
            )
        _ensure_acyclic(data)
        return build_tree(data)
    except RecursionError as e:
        raise DocumentParseError("document is nested too deeply") from e
    except DocumentParseError:
        raise
    except ValueError as e:
        raise DocumentParseError(str(e)) from e

"""Serialization: JSON round-trip for documents, blocks and spans.

Converts typed nodes to/from JSON-compatible dicts, so parsed output can be
handed to renderers in other processes or languages, or stored for tests.

All output is deterministic (sorted keys).

Example:
    from lumenmark import parse
    from lumenmark.serialization import to_json, from_json

    doc = parse("# Hello **World**")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from lumenmark.location import SourceLocation
from lumenmark.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    List,
    Paragraph,
    Table,
    ThematicBreak,
)
from lumenmark.spans import InlineCategory, InlineSpan, LiteralRun, TokenCategory, TokenSpan

# Registry of type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Document": Document,
    "Heading": Heading,
    "Paragraph": Paragraph,
    "CodeBlock": CodeBlock,
    "BlockQuote": BlockQuote,
    "List": List,
    "ThematicBreak": ThematicBreak,
    "Table": Table,
    "SourceLocation": SourceLocation,
    "LiteralRun": LiteralRun,
    "TokenSpan": TokenSpan,
    "InlineSpan": InlineSpan,
}

# Span classes whose ``category`` field needs its enum restored
_CATEGORY_ENUMS: dict[type, type[Enum]] = {
    InlineSpan: InlineCategory,
    TokenSpan: TokenCategory,
}


def to_dict(node: Any) -> dict[str, Any]:
    """Convert a document, block, location or span to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization. Blocks also
    carry their ``kind`` value for consumers that dispatch on it.

    Args:
        node: Any lumenmark dataclass value.

    Returns:
        Dict with ``_type`` and all fields.

    Raises:
        TypeError: If ``node`` is not a lumenmark node or span.

    """
    type_name = type(node).__name__
    if not is_dataclass(node) or _NODE_TYPES.get(type_name) is not type(node):
        msg = f"Cannot serialize {type_name}"
        raise TypeError(msg)

    result: dict[str, Any] = {"_type": type_name}
    if isinstance(node, Block):
        result["kind"] = node.kind.value
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    if isinstance(value, tuple | list):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Any:
    """Reconstruct a typed node from a dict.

    Uses the ``_type`` discriminator to determine the class. Unknown keys
    (such as the informational ``kind``) are ignored.

    Args:
        data: Dict with ``_type`` and fields (as produced by to_dict).

    Returns:
        Frozen dataclass instance.

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name == "category" and node_cls in _CATEGORY_ENUMS:
            kwargs[f.name] = _CATEGORY_ENUMS[node_cls](raw)
        else:
            kwargs[f.name] = _deserialize_value(raw)
    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        if "_type" in value:
            return from_dict(value)
        return value
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node

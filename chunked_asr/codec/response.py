"""Single-field extraction from the recognition response body."""

from __future__ import annotations

import re
import logging
from typing import Any

import orjson

logger = logging.getLogger(__name__)

_PRIMITIVE_RE = re.compile(r"-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?|true|false|null")


def _value_to_text(value: Any) -> str | None:
    if isinstance(value, list):
        # Recognizers return n-best lists; the first candidate is the answer.
        value = value[0] if value else None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return orjson.dumps(value).decode("utf-8")
    return None


def _find_value(node: Any, field_name: str) -> tuple[bool, Any]:
    """Depth-first search in document order for the first ``field_name`` key."""
    if isinstance(node, dict):
        for key, value in node.items():
            if key == field_name:
                return True, value
            found, inner = _find_value(value, field_name)
            if found:
                return True, inner
    elif isinstance(node, list):
        for item in node:
            found, inner = _find_value(item, field_name)
            if found:
                return True, inner
    return False, None


def _skip_ws(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in " \t\r\n":
        pos += 1
    return pos


def _scan_string(text: str, pos: int) -> str | None:
    """Decode the JSON string literal starting at ``text[pos] == '"'``."""
    end = pos + 1
    while end < len(text):
        ch = text[end]
        if ch == "\\":
            end += 2
            continue
        if ch == '"':
            try:
                return orjson.loads(text[pos : end + 1])
            except orjson.JSONDecodeError:
                return None
        end += 1
    return None


def _scan_field(text: str, field_name: str) -> str | None:
    key = orjson.dumps(field_name).decode("utf-8")
    for match in re.finditer(re.escape(key) + r"\s*:", text):
        pos = _skip_ws(text, match.end())
        if pos < len(text) and text[pos] == "[":
            pos = _skip_ws(text, pos + 1)
        if pos >= len(text):
            return None
        if text[pos] == '"':
            return _scan_string(text, pos)
        prim = _PRIMITIVE_RE.match(text, pos)
        if prim is None:
            return None
        try:
            return _value_to_text(orjson.loads(prim.group(0)))
        except orjson.JSONDecodeError:
            return None
    return None


def extract_field(json_text: str, field_name: str) -> str | None:
    """Return the text of ``field_name`` in ``json_text``, or None.

    The first ``field_name`` key in document order wins, at any depth. A list
    value yields its first element. A well-formed body is parsed in full; a
    malformed or truncated one is scanned for the first ``"field_name":``
    occurrence with the same rules. Never raises.
    """
    if not json_text:
        return None
    try:
        doc = orjson.loads(json_text)
    except orjson.JSONDecodeError:
        logger.debug("response is not valid JSON; scanning for %r", field_name)
        return _scan_field(json_text, field_name)

    found, value = _find_value(doc, field_name)
    if not found:
        return None
    return _value_to_text(value)


__all__ = ["extract_field"]

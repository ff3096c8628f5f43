"""Path-addressable edits of raw JSON documents.

``set_value`` rewrites a single value inside a JSON document without
re-serializing the rest of it: the byte span of the target value is
located by walking the document with the standard library decoder and
replaced in place, so key order, whitespace and number formatting of
every other field are preserved exactly.

Paths are dot separated. A numeric segment addresses an array index,
any other segment an object key::

    set_value(doc, "notificationGroup.webhooks.0.integration.integrationId", 42)

Missing keys are appended to their object. A missing array index may only
be the next free slot. Missing intermediate containers are created. A
leading UTF-8 byte order mark is dropped from the result.
"""

import json
from collections.abc import Mapping, Sequence
from typing import Any

from .errors import PatchError

_WHITESPACE = " \t\n\r"
_decoder = json.JSONDecoder()


def set_value(document: bytes, path: str, value: Any) -> bytes:
    """Return ``document`` with the value at ``path`` set to ``value``.

    Args:
        document: UTF-8 encoded JSON document.
        path: Dot separated path to the value.
        value: Any JSON-serializable value.

    Returns:
        The patched document.

    Raises:
        PatchError: If the document is not valid JSON, the path is empty,
            or the path runs through a value that is not a container.
    """
    segments = _split_path(path)
    try:
        text = document.decode("utf-8")
    except UnicodeDecodeError as e:
        raise PatchError(f"document is not valid UTF-8: {e}") from e
    text = text.removeprefix("\ufeff")
    try:
        json.loads(text)
    except json.JSONDecodeError as e:
        raise PatchError(f"document is not valid JSON: {e}") from e

    encoded = json.dumps(value)
    start = _skip_whitespace(text, 0)
    patched = _set_in_value(text, start, segments, encoded, path)
    return patched.encode("utf-8")


def get_value(data: Any, path: str, default: Any = None) -> Any:
    """Read a nested value from decoded JSON, returning ``default`` if absent."""
    current = data
    for segment in _split_path(path):
        if isinstance(current, Mapping):
            if segment not in current:
                return default
            current = current[segment]
        elif isinstance(current, Sequence) and not isinstance(current, str):
            if not segment.isdigit() or int(segment) >= len(current):
                return default
            current = current[int(segment)]
        else:
            return default
    return current


def _split_path(path: str) -> list[str]:
    segments = path.split(".")
    if not path or any(not s for s in segments):
        raise PatchError(f"invalid path: {path!r}")
    return segments


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _value_end(text: str, pos: int) -> int:
    """Return the offset just past the JSON value starting at ``pos``."""
    try:
        _, end = _decoder.raw_decode(text, pos)
    except json.JSONDecodeError as e:
        raise PatchError(f"document is not valid JSON: {e}") from e
    return end


def _set_in_value(
    text: str, pos: int, segments: list[str], encoded: str, path: str
) -> str:
    """Apply the edit to the value starting at ``pos`` and return the new text."""
    if not segments:
        end = _value_end(text, pos)
        return text[:pos] + encoded + text[end:]

    opener = text[pos] if pos < len(text) else ""
    if opener == "{":
        return _set_in_object(text, pos, segments, encoded, path)
    if opener == "[":
        return _set_in_array(text, pos, segments, encoded, path)
    raise PatchError(
        f"cannot address '{segments[0]}' in path {path!r}: parent is not an object or array"
    )


def _set_in_object(
    text: str, pos: int, segments: list[str], encoded: str, path: str
) -> str:
    key, rest = segments[0], segments[1:]
    cursor = _skip_whitespace(text, pos + 1)
    empty = text[cursor] == "}"

    while text[cursor] != "}":
        member_key, after_key = _decoder.raw_decode(text, cursor)
        cursor = _skip_whitespace(text, after_key)
        # Past the colon
        cursor = _skip_whitespace(text, cursor + 1)
        if member_key == key:
            return _set_in_value(text, cursor, rest, encoded, path)
        cursor = _skip_whitespace(text, _value_end(text, cursor))
        if text[cursor] == ",":
            cursor = _skip_whitespace(text, cursor + 1)

    member = json.dumps(key) + ":" + _build(rest, encoded, path)
    if not empty:
        member = "," + member
    return text[:cursor] + member + text[cursor:]


def _set_in_array(
    text: str, pos: int, segments: list[str], encoded: str, path: str
) -> str:
    segment, rest = segments[0], segments[1:]
    if not segment.isdigit():
        raise PatchError(
            f"cannot address key '{segment}' in path {path!r}: parent is an array"
        )
    index = int(segment)

    cursor = _skip_whitespace(text, pos + 1)
    length = 0
    while text[cursor] != "]":
        if length == index:
            return _set_in_value(text, cursor, rest, encoded, path)
        cursor = _skip_whitespace(text, _value_end(text, cursor))
        length += 1
        if text[cursor] == ",":
            cursor = _skip_whitespace(text, cursor + 1)

    if index != length:
        raise PatchError(
            f"index {index} in path {path!r} is out of range for array of length {length}"
        )
    element = _build(rest, encoded, path)
    if length:
        element = "," + element
    return text[:cursor] + element + text[cursor:]


def _build(segments: list[str], encoded: str, path: str) -> str:
    """Serialize the containers needed to hold ``encoded`` at ``segments``."""
    if not segments:
        return encoded
    head, rest = segments[0], segments[1:]
    inner = _build(rest, encoded, path)
    if head.isdigit():
        if head != "0":
            raise PatchError(
                f"index {head} in path {path!r} is out of range for array of length 0"
            )
        return "[" + inner + "]"
    return "{" + json.dumps(head) + ":" + inner + "}"

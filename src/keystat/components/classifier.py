"""Key classifier.

Keys follow the ``<namespace>:<hex type>:<rest>`` convention, where the
second field is the two-digit lowercase hex encoding of a one-byte type tag.
"""

from __future__ import annotations

import re

from ..core.errors import KeyParseError
from ..core.types import Err, Key, KeyRange, Ok, Result, TypeTag

_TYPE_FIELD = re.compile(rb"[0-9a-f]{2}")

DEFAULT_NAMESPACE = b"kv"
MAX_TAG = 0xFF


def split_fields(key: Key) -> list[str]:
    """Best-effort textual split of a key, for diagnostics."""
    return [f.decode("utf-8", errors="backslashreplace") for f in key.split(b":")]


def classify(key: Key) -> Result[TypeTag, KeyParseError]:
    """Return the type tag embedded in key, or the reason it has none.

    Pure function; never raises for malformed input.
    """
    fields = key.split(b":")
    if len(fields) < 3:
        return Err(KeyParseError(f"too few fields: expected 3 colon-separated fields, found {len(fields)}"))

    if _TYPE_FIELD.fullmatch(fields[1]) is None:
        return Err(KeyParseError("malformed type field: 2nd field should be a 1-byte hex string"))

    try:
        tag = int(fields[1], 16)
    except ValueError as e:
        return Err(KeyParseError(f"malformed type field: {e}"))
    return Ok(tag)


def prefix(tag: TypeTag, namespace: Key = DEFAULT_NAMESPACE) -> Key:
    """Return the key prefix shared by every record of type tag."""
    return b"%s:%02x:" % (namespace, tag)


def key_range(tag: TypeTag, namespace: Key = DEFAULT_NAMESPACE) -> KeyRange:
    """Return the half-open range covering every key of type tag.

    The upper bound is the next tag's prefix. The last tag has no successor
    in one byte, so its bound is its own prefix with the final ``:`` bumped
    to ``;``, which sorts after every ``<ns>:ff:`` key.
    """
    if not 0 <= tag <= MAX_TAG:
        raise ValueError(f"type tag out of range: {tag}")

    start = prefix(tag, namespace)
    if tag < MAX_TAG:
        end = prefix(tag + 1, namespace)
    else:
        end = start[:-1] + bytes([start[-1] + 1])
    return KeyRange(start, end)

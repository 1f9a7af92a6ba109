"""Encoding helpers shared by the request builder and the dispatcher."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from urllib.parse import parse_qsl, urlencode


def to_values(value: object) -> list[str]:
    """Return *value* as a list of strings.

    A bare string (or bytes) is one value; any other iterable contributes
    each of its items; anything else is a single value.
    """

    if isinstance(value, bytes):
        return [value.decode("utf-8")]
    if isinstance(value, str):
        return [value]
    if isinstance(value, Iterable):
        return [item.decode("utf-8") if isinstance(item, bytes) else str(item) for item in value]
    return [str(value)]


def normalize_values(values: Mapping[str, object]) -> dict[str, list[str]]:
    return {str(key): to_values(value) for key, value in values.items()}


def encode_values(values: Mapping[str, object]) -> str:
    """Form-encode *values* with keys sorted so the output is stable.

    Spaces become ``+`` and multiple values for a key keep their order:

    >>> encode_values({"q": ["hello world"], "a": ["1", "2"]})
    'a=1&a=2&q=hello+world'
    """

    pairs = [
        (key, item)
        for key, items in sorted(normalize_values(values).items())
        for item in items
    ]
    return urlencode(pairs)


def parse_values(encoded: str | bytes) -> dict[str, list[str]]:
    """Inverse of :func:`encode_values`."""

    if isinstance(encoded, bytes):
        encoded = encoded.decode("ascii")
    parsed: dict[str, list[str]] = {}
    for key, value in parse_qsl(encoded, keep_blank_values=True):
        parsed.setdefault(key, []).append(value)
    return parsed


__all__ = ["encode_values", "normalize_values", "parse_values", "to_values"]

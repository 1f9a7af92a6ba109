"""Typed option values accepted by ``Session.request`` and friends.

Each class labels a plain value with the part of the request it configures.
Nothing is validated here: malformed names or values travel untouched until
the transport rejects them at dispatch time::

    session.get(
        "https://example.com/search",
        Headers({"Accept": ["text/html"]}),
        Params({"q": ["hello world"]}),
        Cookies({"session": "abc123"}),
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from requests.structures import CaseInsensitiveDict


class Headers(dict):
    """Header name to one or more values."""


class Params(dict):
    """Query parameter name to one or more values, appended to the URL."""


class DataForm(dict):
    """Form field name to one or more values, sent as a urlencoded body."""


class Cookies(dict):
    """Cookie name to a single value."""


@dataclass(frozen=True)
class Data:
    """Opaque request body sent as-is."""

    payload: str | bytes


# ``CaseInsensitiveDict`` is the transport's own header container and is
# taken as a ready-made header set.
Option = Union[Headers, Params, DataForm, Data, Cookies, CaseInsensitiveDict]

OPTION_TYPES: tuple[type, ...] = (
    Headers,
    Params,
    DataForm,
    Data,
    Cookies,
    CaseInsensitiveDict,
)


__all__ = [
    "Cookies",
    "Data",
    "DataForm",
    "Headers",
    "OPTION_TYPES",
    "Option",
    "Params",
]

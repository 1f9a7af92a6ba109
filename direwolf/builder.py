"""Fold typed options into a request descriptor."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from requests.structures import CaseInsensitiveDict

from .exceptions import UnknownOptionError
from .models import Request
from .options import OPTION_TYPES, Cookies, Data, DataForm, Headers, Option, Params
from .utils import encode_values, normalize_values, to_values

LOGGER = logging.getLogger(__name__)


def _header_set(headers: Mapping[str, object]) -> CaseInsensitiveDict:
    merged: CaseInsensitiveDict = CaseInsensitiveDict()
    for name, raw in headers.items():
        values = to_values(raw)
        if name in merged:
            merged[name].extend(values)
        elif values:
            # A name with no values adds no header.
            merged[name] = values
    return merged


def _set_params(req: Request, params: Params) -> None:
    req.params = normalize_values(params)
    # Appended verbatim: an existing query string, or a second Params
    # option, produces "?a=1?b=2".
    req.url = req.url + "?" + encode_values(req.params)


def _set_cookies(req: Request, cookies: Cookies) -> None:
    req.cookies = [(str(name), str(value)) for name, value in cookies.items()]


def prepare_request(
    method: str, url: str, *options: Option, strict: bool = False
) -> Request:
    """Build a :class:`Request` from *method*, *url* and typed *options*.

    Options are applied in order and each kind owns one descriptor field, so
    a later option of the same kind replaces an earlier one. Options of any
    other type are dropped, or rejected with :class:`UnknownOptionError`
    when *strict* is true. Nothing here touches the network.
    """

    req = Request(method=method, url=url)
    for option in options:
        if not isinstance(option, OPTION_TYPES):
            if strict:
                raise UnknownOptionError(
                    f"Unsupported request option of type {type(option).__name__}"
                )
            LOGGER.debug("Ignoring unsupported request option %r", type(option).__name__)
        elif isinstance(option, (Headers, CaseInsensitiveDict)):
            req.headers = _header_set(option)
        elif isinstance(option, Params):
            _set_params(req, option)
        elif isinstance(option, DataForm):
            req.data_form = normalize_values(option)
        elif isinstance(option, Data):
            req.data = option
        elif isinstance(option, Cookies):
            _set_cookies(req, option)
    return req


__all__ = ["prepare_request"]

"""Session object owning the HTTP transport and dispatching requests."""

from __future__ import annotations

import logging
import re
from http.cookiejar import DefaultCookiePolicy
from typing import Optional

import requests
from requests import exceptions as requests_exceptions
from requests.cookies import RequestsCookieJar
from requests.structures import CaseInsensitiveDict

from .builder import prepare_request
from .config import Settings
from .exceptions import ConnectionError, InvalidRequestError, Timeout, TransportError
from .logging_utils import redact_headers
from .models import Request, Response
from .options import Option
from .utils import encode_values

LOGGER = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# RFC 9110 token characters.
_METHOD_PATTERN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")

_MALFORMED_REQUEST_ERRORS = (
    requests_exceptions.MissingSchema,
    requests_exceptions.InvalidSchema,
    requests_exceptions.InvalidURL,
    requests_exceptions.InvalidHeader,
)


def _wire_headers(req: Request) -> CaseInsensitiveDict:
    wire: CaseInsensitiveDict = CaseInsensitiveDict()
    for name, values in (req.headers or {}).items():
        wire[name] = ", ".join(values)
    return wire


def _attach_body(req: Request, headers: CaseInsensitiveDict) -> Optional[bytes]:
    if req.data_form is not None:
        if req.data is not None:
            LOGGER.warning("Both form data and a raw body were supplied; sending the form data")
        body = encode_values(req.data_form).encode("ascii")
        if "Content-Type" not in headers:
            headers["Content-Type"] = FORM_CONTENT_TYPE
        headers["Content-Length"] = str(len(body))
        return body
    if req.data is not None:
        payload = req.data.payload
        return payload.encode("utf-8") if isinstance(payload, str) else payload
    return None


def _cookie_jar(req: Request) -> RequestsCookieJar:
    # Cookies kept in the request's own jar are re-sent on redirect hops.
    jar = RequestsCookieJar()
    for name, value in req.cookies or ():
        jar.set(name, value)
    return jar


def _merge_explicit_cookie(prepared: requests.PreparedRequest, explicit: Optional[str]) -> None:
    # requests skips its jar when a Cookie header is already present.
    if not explicit:
        return
    pairs = "; ".join(f"{cookie.name}={cookie.value}" for cookie in prepared._cookies)
    prepared.headers["Cookie"] = f"{explicit}; {pairs}" if pairs else explicit


def _check_header_encoding(headers: CaseInsensitiveDict) -> None:
    # http.client sends names as ASCII and values as Latin-1.
    for name, value in headers.items():
        try:
            if isinstance(name, str):
                name.encode("ascii")
            if isinstance(value, str):
                value.encode("latin-1")
        except UnicodeError as exc:
            raise InvalidRequestError(
                f"Header {name!r} cannot be sent over HTTP/1.1: {exc.reason}"
            ) from exc


class Session:
    """Issue requests through one long-lived ``requests.Session``.

    The transport is created once and never replaced, so connections are
    pooled across calls and a single ``Session`` may be shared between
    threads. Cookies set by servers are not stored on the session: every
    call starts from exactly the cookies passed to it.
    """

    def __init__(self, *, strict: bool | None = None) -> None:
        if strict is None:
            strict = Settings.from_env().strict_options
        self.strict = strict
        client = requests.Session()
        client.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
        self._client = client

    @property
    def client(self) -> requests.Session:
        return self._client

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get(self, url: str, *options: Option) -> Response:
        return self.request("GET", url, *options)

    def post(self, url: str, *options: Option) -> Response:
        return self.request("POST", url, *options)

    def request(self, method: str, url: str, *options: Option) -> Response:
        """Build a request from *options* and send it."""

        req = prepare_request(method, url, *options, strict=self.strict)
        return self.send(req)

    def prepare(self, req: Request) -> requests.PreparedRequest:
        """Translate a descriptor into a wire-level request.

        Session-level default headers are not merged in: the outgoing
        headers are exactly those carried by *req* plus the body and cookie
        headers derived from it.
        """

        if not _METHOD_PATTERN.match(req.method or ""):
            raise InvalidRequestError(f"Invalid HTTP method: {req.method!r}")

        headers = _wire_headers(req)
        body = _attach_body(req, headers)
        try:
            prepared = requests.Request(
                method=req.method,
                url=req.url,
                headers=headers,
                data=body,
                cookies=_cookie_jar(req),
            ).prepare()
        except _MALFORMED_REQUEST_ERRORS as exc:
            raise InvalidRequestError(str(exc)) from exc
        except ValueError as exc:
            raise InvalidRequestError(f"Invalid request for {req.url!r}: {exc}") from exc

        _merge_explicit_cookie(prepared, headers.get("Cookie"))
        _check_header_encoding(prepared.headers)
        return prepared

    def send(self, req: Request) -> Response:
        """Dispatch *req* and return the fully read response.

        HTTP error statuses are returned, not raised. Malformed input raises
        :class:`InvalidRequestError`; network failures raise
        :class:`TransportError` subclasses.
        """

        prepared = self.prepare(req)
        LOGGER.debug(
            "Dispatching %s %s headers=%s",
            prepared.method,
            prepared.url,
            redact_headers(prepared.headers),
        )
        settings = self._client.merge_environment_settings(
            prepared.url, {}, None, None, None
        )
        try:
            resp = self._client.send(prepared, **settings)
        except requests_exceptions.Timeout as exc:
            raise Timeout(f"Timed out requesting {prepared.url}: {exc}") from exc
        except requests_exceptions.ConnectionError as exc:
            raise ConnectionError(f"Unable to connect to {prepared.url}: {exc}") from exc
        except _MALFORMED_REQUEST_ERRORS as exc:
            raise InvalidRequestError(str(exc)) from exc
        except UnicodeError as exc:
            # Raised while encoding a redirect hop's headers or URL.
            raise InvalidRequestError(f"Request to {prepared.url} cannot be encoded: {exc}") from exc
        except requests_exceptions.RequestException as exc:
            raise TransportError(f"Request to {prepared.url} failed: {exc}") from exc

        LOGGER.debug(
            "Received HTTP %s from %s (%d bytes)",
            resp.status_code,
            resp.url,
            len(resp.content),
        )
        return Response(
            status_code=resp.status_code,
            url=resp.url,
            headers=CaseInsensitiveDict(resp.headers),
            content=resp.content,
            reason=resp.reason or "",
            encoding=resp.encoding,
            request=req,
        )


__all__ = ["FORM_CONTENT_TYPE", "Session"]

"""One-shot helpers that send a single request through a fresh Session."""

from __future__ import annotations

from .models import Response
from .options import Option
from .session import Session


def request(method: str, url: str, *options: Option, strict: bool | None = None) -> Response:
    with Session(strict=strict) as session:
        return session.request(method, url, *options)


def get(url: str, *options: Option, strict: bool | None = None) -> Response:
    return request("GET", url, *options, strict=strict)


def post(url: str, *options: Option, strict: bool | None = None) -> Response:
    return request("POST", url, *options, strict=strict)


__all__ = ["get", "post", "request"]

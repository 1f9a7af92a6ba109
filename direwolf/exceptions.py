"""Exceptions raised by direwolf."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .models import Response


class DirewolfError(RuntimeError):
    """Base class for every error raised by direwolf."""


class InvalidRequestError(DirewolfError):
    """The request could not be built; nothing was sent."""


class UnknownOptionError(InvalidRequestError, TypeError):
    """An option of an unrecognised kind was passed to a strict session."""


class TransportError(DirewolfError):
    """Base networking error."""


class ConnectionError(TransportError):
    """Connection establishment failure."""


class Timeout(TransportError):
    """Timeout communicating with remote server."""


class HTTPStatusError(DirewolfError):
    """Raised by ``Response.raise_for_status`` for 4xx and 5xx responses."""

    def __init__(self, message: str, *, response: "Response") -> None:
        super().__init__(message)
        self.response = response


__all__ = [
    "ConnectionError",
    "DirewolfError",
    "HTTPStatusError",
    "InvalidRequestError",
    "Timeout",
    "TransportError",
    "UnknownOptionError",
]

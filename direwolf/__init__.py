"""Direwolf: issue HTTP requests from a URL and a handful of typed options."""

from __future__ import annotations

# Semantic version for package consumers.
__version__ = "0.1.0"

from .api import get, post, request
from .exceptions import (
    ConnectionError,
    DirewolfError,
    HTTPStatusError,
    InvalidRequestError,
    Timeout,
    TransportError,
    UnknownOptionError,
)
from .models import Request, Response
from .options import Cookies, Data, DataForm, Headers, Params
from .session import Session

__all__ = [
    "__version__",
    "ConnectionError",
    "Cookies",
    "Data",
    "DataForm",
    "DirewolfError",
    "HTTPStatusError",
    "Headers",
    "InvalidRequestError",
    "Params",
    "Request",
    "Response",
    "Session",
    "Timeout",
    "TransportError",
    "UnknownOptionError",
    "get",
    "post",
    "request",
]

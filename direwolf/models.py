"""Request descriptor and response value."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from requests.structures import CaseInsensitiveDict

from .exceptions import HTTPStatusError
from .options import Data


@dataclass
class Request:
    """A request being assembled before dispatch.

    Fields stay ``None`` unless the matching option was supplied, so the
    dispatcher can tell "not given" apart from "given but empty".
    """

    method: str
    url: str
    headers: Optional[CaseInsensitiveDict] = None
    params: Optional[dict[str, list[str]]] = None
    data_form: Optional[dict[str, list[str]]] = None
    data: Optional[Data] = None
    cookies: Optional[List[Tuple[str, str]]] = None


@dataclass
class Response:
    status_code: int
    url: str
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    content: bytes = b""
    reason: str = ""
    encoding: Optional[str] = None
    request: Optional[Request] = None

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    @property
    def text(self) -> str:
        return self.content.decode(self.encoding or "utf-8", errors="replace")

    def json(self, **kwargs: Any) -> Any:
        return json.loads(self.text, **kwargs)

    def raise_for_status(self) -> None:
        """Raise :class:`HTTPStatusError` for 4xx and 5xx responses."""

        if 400 <= self.status_code < 500:
            kind = "Client Error"
        elif 500 <= self.status_code < 600:
            kind = "Server Error"
        else:
            return
        raise HTTPStatusError(
            f"{self.status_code} {kind}: {self.reason} for url: {self.url}",
            response=self,
        )


__all__ = ["Request", "Response"]

from __future__ import annotations

import pytest
from requests.structures import CaseInsensitiveDict

from direwolf.exceptions import HTTPStatusError
from direwolf.models import Response


def _response(status_code: int, content: bytes = b"", encoding: str | None = None) -> Response:
    return Response(
        status_code=status_code,
        url="http://example.com/",
        headers=CaseInsensitiveDict({"Content-Type": "text/plain"}),
        content=content,
        reason="Reason",
        encoding=encoding,
    )


def test_text_defaults_to_utf8() -> None:
    assert _response(200, "żubr".encode("utf-8")).text == "żubr"


def test_text_uses_declared_encoding() -> None:
    assert _response(200, "café".encode("latin-1"), encoding="ISO-8859-1").text == "café"


def test_json_parses_body() -> None:
    assert _response(200, b'{"items": [1, 2]}').json() == {"items": [1, 2]}


@pytest.mark.parametrize("status_code", [200, 204, 302])
def test_raise_for_status_ignores_success(status_code: int) -> None:
    response = _response(status_code)

    response.raise_for_status()
    assert response.ok is True


@pytest.mark.parametrize(
    "status_code,kind", [(404, "Client Error"), (503, "Server Error")]
)
def test_raise_for_status_raises_for_errors(status_code: int, kind: str) -> None:
    response = _response(status_code)

    with pytest.raises(HTTPStatusError, match=kind) as excinfo:
        response.raise_for_status()

    assert excinfo.value.response is response
    assert response.ok is False

from pathlib import Path

import httpx
import pytest

from saucebot.config.schema import Config


def make_config(**overrides) -> Config:
    data = {
        "http": {"userAgent": "saucebot-tests/1.0", "timeout": 5.0},
        "google": {
            "searchUrl": "https://google.example/searchbyimage/upload",
            "searchTermPrefix": '<a class="term">',
            "searchTermSuffix": "</a>",
            "resultLinkPrefix": '<div class="r"><a href="',
            "resultLinkSuffix": '"',
        },
        "saucenao": {
            "searchUrl": "https://saucenao.example/search.php?output_type=2&api_key=",
            "apiKey": "sauce-secret-key",
        },
        "logging": {"file": ""},
    }
    for section, values in overrides.items():
        data[section].update(values)
    return Config.model_validate(data)


def stub_async_client(monkeypatch, responder, calls: list) -> None:
    """Replace httpx.AsyncClient used by the request builder with a canned responder."""

    class StubClient:
        def __init__(self, **kwargs):
            self.kwargs = kwargs

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def send(self, request, stream=False):
            calls.append({"request": request, "client": self.kwargs, "stream": stream})
            return responder(request)

    monkeypatch.setattr("saucebot.sauce.http.httpx.AsyncClient", StubClient)


class FailingStream(httpx.AsyncByteStream):
    async def __aiter__(self):
        raise httpx.ReadError("connection reset")
        yield b""  # pragma: no cover


@pytest.fixture
def config() -> Config:
    return make_config()


@pytest.fixture
def image_file(tmp_path: Path) -> Path:
    path = tmp_path / "cat.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n\x00\x01\x02fake image bytes\xff\xfeEND")
    return path

import json
from pathlib import Path

import httpx
import pytest

from conftest import FailingStream, stub_async_client
from saucebot.sauce.errors import DecodeError, NoResultsError, ResponseReadError, UploadError
from saucebot.sauce.models import SimilarityMatch
from saucebot.sauce.saucenao import parse_matches, rank_matches, resolve_via_saucenao


def _result(similarity: str, title: str = "", urls: list[str] | None = None) -> dict:
    return {"header": {"similarity": similarity}, "data": {"title": title, "ext_urls": urls or []}}


def _payload(*results: dict) -> dict:
    return {"header": {"status": 0}, "results": list(results)}


@pytest.mark.asyncio
async def test_saucenao_lookup_ranks_by_similarity(monkeypatch, config, image_file: Path) -> None:
    calls: list = []
    payload = _payload(
        _result("50.5", "low", ["https://low.example/"]),
        _result("91.02", "high", ["https://high.example/", "https://high2.example/"]),
    )
    stub_async_client(
        monkeypatch,
        lambda request: httpx.Response(200, json=payload, request=request),
        calls,
    )

    ranked = await resolve_via_saucenao(image_file, config.saucenao, config.http)

    assert [m.title for m in ranked.matches] == ["high", "low"]
    assert ranked.top.similarity == pytest.approx(91.02)
    assert ranked.top.source_urls == ("https://high.example/", "https://high2.example/")

    request = calls[0]["request"]
    assert request.method == "POST"
    assert str(request.url).endswith("api_key=sauce-secret-key")
    assert b'name="file"' in request.read()
    assert calls[0]["client"]["follow_redirects"] is True


@pytest.mark.asyncio
async def test_saucenao_empty_results_is_no_results(monkeypatch, config, image_file: Path) -> None:
    stub_async_client(
        monkeypatch,
        lambda request: httpx.Response(200, json=_payload(), request=request),
        [],
    )

    with pytest.raises(NoResultsError):
        await resolve_via_saucenao(image_file, config.saucenao, config.http)


@pytest.mark.asyncio
async def test_saucenao_malformed_json_is_decode_error(monkeypatch, config, image_file: Path) -> None:
    stub_async_client(
        monkeypatch,
        lambda request: httpx.Response(429, text="<html>Too many requests</html>", request=request),
        [],
    )

    with pytest.raises(DecodeError):
        await resolve_via_saucenao(image_file, config.saucenao, config.http)


@pytest.mark.asyncio
async def test_saucenao_body_read_failure(monkeypatch, config, image_file: Path) -> None:
    stub_async_client(
        monkeypatch,
        lambda request: httpx.Response(200, stream=FailingStream(), request=request),
        [],
    )

    with pytest.raises(ResponseReadError):
        await resolve_via_saucenao(image_file, config.saucenao, config.http)


@pytest.mark.asyncio
async def test_saucenao_timeout_is_upload_error(monkeypatch, config, image_file: Path) -> None:
    def respond(request):
        raise httpx.ReadTimeout("timed out", request=request)

    stub_async_client(monkeypatch, respond, [])

    with pytest.raises(UploadError):
        await resolve_via_saucenao(image_file, config.saucenao, config.http)


def test_rank_matches_is_stable_descending() -> None:
    matches = [SimilarityMatch(similarity=s, title=str(i)) for i, s in enumerate([50, 90, 90, 10])]

    ranked = rank_matches(matches)

    assert [m.title for m in ranked.matches] == ["1", "2", "0", "3"]


def test_rank_matches_empty_raises() -> None:
    with pytest.raises(NoResultsError):
        rank_matches([])


def test_parse_matches_reads_numeric_strings() -> None:
    body = json.dumps(_payload(_result("87.61", "Title", ["https://a.example/"])))

    (match,) = parse_matches(body)

    assert match == SimilarityMatch(similarity=87.61, title="Title", source_urls=("https://a.example/",))


def test_parse_matches_tolerates_missing_fields() -> None:
    body = json.dumps({"results": [{"header": {"similarity": "12.5"}, "data": {}}]})

    (match,) = parse_matches(body)

    assert match.title == ""
    assert match.source_urls == ()


def test_parse_matches_missing_results_key_is_empty() -> None:
    assert parse_matches(b'{"header": {"status": -1}}') == []


def test_parse_matches_bad_similarity_is_decode_error() -> None:
    with pytest.raises(DecodeError):
        parse_matches(json.dumps(_payload(_result("not-a-number"))))


def test_parse_matches_non_object_is_decode_error() -> None:
    with pytest.raises(DecodeError):
        parse_matches(b"[1, 2, 3]")


@pytest.mark.parametrize(
    "item",
    [
        {"header": "x", "data": {}},
        {"header": {"similarity": "10"}, "data": ["not", "an", "object"]},
        {"header": {"similarity": "10"}, "data": {"ext_urls": "https://a.example/"}},
        {"header": {"similarity": "10"}, "data": {"ext_urls": [1, 2]}},
        {"header": {"similarity": "10"}, "data": {"title": {"en": "T"}}},
    ],
)
def test_parse_matches_wrong_field_types_are_decode_errors(item: dict) -> None:
    with pytest.raises(DecodeError):
        parse_matches(json.dumps({"results": [item]}))

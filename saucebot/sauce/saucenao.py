"""SauceNAO API adapter."""

import json
from pathlib import Path
from typing import Any

from saucebot.config.schema import HttpConfig, SaucenaoConfig
from saucebot.sauce.errors import (
    NO_SAUCE,
    TECHNICAL,
    DecodeError,
    NetworkError,
    NoResultsError,
    RequestBuildError,
    UploadError,
)
from saucebot.sauce.http import issue_request
from saucebot.sauce.models import RankedResultSet, RequestSpec, SimilarityMatch

UPLOAD_FIELD = "file"


class SaucenaoSauceFinder:
    """Resolve image sauce through the saucenao.com JSON API."""

    def __init__(self, saucenao: SaucenaoConfig, http: HttpConfig):
        self.saucenao = saucenao
        self.http = http

    async def resolve(self, image_path: Path) -> RankedResultSet:
        spec = RequestSpec(
            method="POST",
            url=self.saucenao.search_url + self.saucenao.api_key,
            file_path=image_path,
            field_name=UPLOAD_FIELD,
            follow_redirects=True,
        )
        try:
            response = await issue_request(spec, user_agent=self.http.user_agent, timeout=self.http.timeout)
        except (RequestBuildError, NetworkError) as e:
            raise UploadError(f"{TECHNICAL}: Failed to upload image to Saucenao ({e})") from e

        return rank_matches(parse_matches(response.content))


def parse_matches(body: bytes | str) -> list[SimilarityMatch]:
    """Decode a SauceNAO JSON body into matches, in response order."""
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"{TECHNICAL}: Failed to process Saucenao json response") from e
    if not isinstance(payload, dict):
        raise DecodeError(f"{TECHNICAL}: Failed to process Saucenao json response")

    results = payload.get("results") or []
    if not isinstance(results, list):
        raise DecodeError(f"{TECHNICAL}: Failed to process Saucenao json response")

    return [_parse_match(item) for item in results]


def _parse_match(item: Any) -> SimilarityMatch:
    if not isinstance(item, dict):
        raise DecodeError(f"{TECHNICAL}: Failed to process Saucenao json response")
    header = item.get("header") or {}
    data = item.get("data") or {}
    if not isinstance(header, dict) or not isinstance(data, dict):
        raise DecodeError(f"{TECHNICAL}: Failed to process Saucenao json response")

    raw_similarity = header.get("similarity", "0")
    try:
        similarity = float(raw_similarity)
    except (TypeError, ValueError):
        raise DecodeError(f"{TECHNICAL}: Invalid similarity in Saucenao response: {raw_similarity!r}") from None

    urls = data.get("ext_urls") or []
    if not isinstance(urls, list) or not all(isinstance(url, str) for url in urls):
        raise DecodeError(f"{TECHNICAL}: Invalid ext_urls in Saucenao response")
    title = data.get("title") or ""
    if not isinstance(title, str):
        raise DecodeError(f"{TECHNICAL}: Invalid title in Saucenao response")

    return SimilarityMatch(
        similarity=similarity,
        title=title,
        source_urls=tuple(url for url in urls if url),
    )


def rank_matches(matches: list[SimilarityMatch]) -> RankedResultSet:
    """Sort matches by descending similarity; equal similarities keep response order."""
    if not matches:
        raise NoResultsError(NO_SAUCE)
    return RankedResultSet(matches=tuple(sorted(matches, key=lambda m: m.similarity, reverse=True)))


async def resolve_via_saucenao(image_path: Path, saucenao: SaucenaoConfig, http: HttpConfig) -> RankedResultSet:
    """Look up an image on SauceNAO."""
    return await SaucenaoSauceFinder(saucenao, http).resolve(image_path)

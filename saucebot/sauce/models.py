"""Shared sauce lookup models."""

from dataclasses import dataclass, field
from pathlib import Path

MAX_GOOGLE_RESULTS = 4


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Google Images result.

    ``search_term`` is what Google shows next to "Possible related search";
    ``links`` holds at most ``MAX_GOOGLE_RESULTS`` unescaped result links in page order.
    """

    search_term: str
    links: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.links) > MAX_GOOGLE_RESULTS:
            raise ValueError(f"at most {MAX_GOOGLE_RESULTS} links are allowed")


@dataclass(slots=True, frozen=True)
class SimilarityMatch:
    """Single SauceNAO match."""

    similarity: float
    title: str = ""
    source_urls: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class RankedResultSet:
    """SauceNAO matches sorted by descending similarity. Never empty."""

    matches: tuple[SimilarityMatch, ...]

    def __post_init__(self) -> None:
        if not self.matches:
            raise ValueError("a ranked result set needs at least one match")

    @property
    def top(self) -> SimilarityMatch:
        return self.matches[0]


@dataclass(slots=True, frozen=True)
class RequestSpec:
    """Description of one outbound request, consumed by ``issue_request``."""

    method: str
    url: str
    file_path: Path | None = None
    field_name: str = "file"
    follow_redirects: bool = True
    extra_fields: dict[str, str] = field(default_factory=lambda: {"image_content": ""})

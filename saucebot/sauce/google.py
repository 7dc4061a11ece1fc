"""Google Images reverse search adapter.

The lookup runs in four strictly sequential stages:

- upload the image without following redirects
- read the search url from the ``Location`` header of the 3xx answer
- fetch the results page from that url
- scrape the search term and the result links out of the page
"""

import html
from pathlib import Path

from saucebot.config.schema import GoogleConfig, HttpConfig
from saucebot.sauce.errors import (
    NO_SAUCE,
    TECHNICAL,
    NetworkError,
    NoResultsError,
    NoSauceError,
    RequestBuildError,
    UploadError,
)
from saucebot.sauce.extract import extract_between
from saucebot.sauce.http import issue_request
from saucebot.sauce.models import MAX_GOOGLE_RESULTS, RequestSpec, SearchResult

UPLOAD_FIELD = "encoded_image"
MATCHING_PAGES_MARKER = "Pages that include matching images"


class GoogleSauceFinder:
    """Resolve image sauce by scraping Google Images results."""

    def __init__(self, google: GoogleConfig, http: HttpConfig):
        self.google = google
        self.http = http

    async def resolve(self, image_path: Path) -> SearchResult:
        search_url = await self._upload(image_path)
        page = await self._fetch(search_url)
        return self.parse_results_page(page)

    async def _upload(self, image_path: Path) -> str:
        spec = RequestSpec(
            method="POST",
            url=self.google.search_url,
            file_path=image_path,
            field_name=UPLOAD_FIELD,
            follow_redirects=False,
        )
        try:
            response = await issue_request(spec, user_agent=self.http.user_agent, timeout=self.http.timeout)
        except (RequestBuildError, NetworkError) as e:
            raise UploadError(f"{TECHNICAL}: Failed to upload image to Google ({e})") from e

        location = response.headers.get("Location", "")
        if not location:
            raise NoResultsError(f"{TECHNICAL}: Failed to retrieve Google search url")
        return self._with_locale(location)

    async def _fetch(self, search_url: str) -> str:
        spec = RequestSpec(method="GET", url=search_url, follow_redirects=True)
        response = await issue_request(spec, user_agent=self.http.user_agent, timeout=self.http.timeout)
        return response.text

    def _with_locale(self, url: str) -> str:
        if not self.google.locale:
            return url
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}hl={self.google.locale}"

    def parse_results_page(self, page: str) -> SearchResult:
        """Scrape a results page into a ``SearchResult``."""
        terms = extract_between(
            page,
            self.google.search_term_prefix,
            self.google.search_term_suffix,
            MAX_GOOGLE_RESULTS,
        )
        if not terms:
            raise NoSauceError("Failed to find what this image is about")

        idx = page.rfind(MATCHING_PAGES_MARKER)
        if idx == -1:
            raise NoSauceError(NO_SAUCE)

        limit = min(self.google.max_results, MAX_GOOGLE_RESULTS)
        links = extract_between(
            page[idx:],
            self.google.result_link_prefix,
            self.google.result_link_suffix,
            limit,
        )
        return SearchResult(
            search_term=html.unescape(terms[0]),
            links=tuple(html.unescape(link) for link in links),
        )


async def resolve_via_google(image_path: Path, google: GoogleConfig, http: HttpConfig) -> SearchResult:
    """Look up an image on Google Images."""
    return await GoogleSauceFinder(google, http).resolve(image_path)

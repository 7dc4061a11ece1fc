"""HTTP request builder shared by the sauce backends."""

from pathlib import Path

import httpx

from saucebot.sauce.errors import (
    TECHNICAL,
    ImageReadError,
    NetworkError,
    RequestBuildError,
    ResponseReadError,
)
from saucebot.sauce.models import RequestSpec

DEFAULT_TIMEOUT = 10.0


def build_request(spec: RequestSpec, user_agent: str) -> httpx.Request:
    """Turn a ``RequestSpec`` into an ``httpx.Request``.

    With a file path the body is ``multipart/form-data`` holding the file under
    ``spec.field_name`` plus ``spec.extra_fields``; httpx sets the content type.
    """
    headers = {"User-Agent": user_agent}
    files = None
    data = None
    if spec.file_path is not None:
        path = Path(spec.file_path)
        try:
            content = path.read_bytes()
        except OSError as e:
            raise ImageReadError(f"{TECHNICAL}: Failed to open file {path.name}") from e
        files = {spec.field_name: (path.name, content, "application/octet-stream")}
        data = dict(spec.extra_fields)

    try:
        return httpx.Request(spec.method, spec.url, headers=headers, data=data, files=files)
    except (httpx.InvalidURL, httpx.UnsupportedProtocol, TypeError, ValueError) as e:
        raise RequestBuildError(f"{TECHNICAL}: Failed to create HTTP request") from e


async def issue_request(
    spec: RequestSpec,
    *,
    user_agent: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> httpx.Response:
    """Send one request and return the response with its body fully read.

    With ``follow_redirects`` disabled the first 3xx response is returned
    as-is so the caller can inspect its ``Location`` header. Error statuses
    are not raised here.
    """
    request = build_request(spec, user_agent)

    async with httpx.AsyncClient(follow_redirects=spec.follow_redirects, timeout=timeout) as client:
        try:
            response = await client.send(request, stream=True)
        except httpx.UnsupportedProtocol as e:
            raise RequestBuildError(f"{TECHNICAL}: Failed to create HTTP request") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"{TECHNICAL}: Failed to retrieve HTTP response") from e

        try:
            await response.aread()
        except httpx.HTTPError as e:
            raise ResponseReadError(f"{TECHNICAL}: Failed to read HTTP response data") from e
        finally:
            await response.aclose()

    return response

"""Render lookup results as reply text."""

from saucebot.sauce.models import RankedResultSet, SearchResult

DEFAULT_LOW_SIMILARITY = 60.0


def _bold(text: str, html: bool) -> str:
    return f"<b>{text}</b>" if html else text


def format_google(result: SearchResult, *, html: bool = False) -> str:
    """Header naming the search term, a blank line, then one link per line."""
    header = f"Google Images says this is: {_bold(result.search_term, html)}"
    links = [link for link in result.links if link]
    return "\n\n".join([header, "\n".join(links)]) if links else header


def format_saucenao(
    result: RankedResultSet,
    *,
    low_similarity: float = DEFAULT_LOW_SIMILARITY,
    html: bool = False,
) -> str:
    """Optional low similarity warning, then titles and sources in rank order."""
    lines: list[str] = []
    if result.top.similarity < low_similarity:
        lines.append(_bold(f"Similarity is below {low_similarity:g}%, results might be bad", html))

    lines.append(_bold("Titles:", html))
    lines.append(", ".join(m.title for m in result.matches if m.title))

    lines.append(_bold("Sources:", html))
    for match in result.matches:
        lines.extend(url for url in match.source_urls if url)

    return "\n".join(lines)

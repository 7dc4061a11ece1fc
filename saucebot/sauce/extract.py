"""Marker based text extraction used to scrape HTML pages."""

import re
from itertools import islice


def extract_between(source: str, left: str, right: str, max_matches: int | None = None) -> list[str]:
    """
    Find the text between ``left`` and the next ``right``, up to ``max_matches`` times.

    Markers are literal text. Each match is the shortest span after an occurrence
    of ``left``; matches are returned in page order with the markers stripped.
    A missing match yields an empty list, never an error.

    Example:
        >>> extract_between("a[X]b[Y]c[Z]", "[", "]", 2)
        ['X', 'Y']
    """
    if max_matches is not None and max_matches <= 0:
        return []

    pattern = re.compile(f"{re.escape(left)}(.*?){re.escape(right)}")
    return [m.group(1) for m in islice(pattern.finditer(source), max_matches)]

"""Utilities for redacting secrets from replies and log lines."""

from __future__ import annotations

import re
from typing import Iterable


class SensitiveOutputRedactor:
    """Redact api keys before text is shown to users or written to logs."""

    SECRET_PLACEHOLDER = "[REDACTED_SECRET]"

    # api_key=... inside query strings, e.g. error messages that quote the request url
    _QUERY_SECRET_RE = re.compile(r"(?i)([?&](?:api[_-]?key|token|key)=)([^&\s\"'<>]+)")
    _KV_SECRET_RE = re.compile(
        r'(?i)(["\']?(?:api[_-]?key|token|secret|password)["\']?\s*[:=]\s*["\']?)([^"\'\s,}\[\]&]+)'
    )

    def __init__(self, enabled: bool = True, secrets: Iterable[str] | None = None):
        self.enabled = enabled
        self._literal_secrets: set[str] = set()
        for raw in secrets or ():
            value = str(raw or "").strip()
            if len(value) >= 6:
                self._literal_secrets.add(value)

    def redact(self, text: str) -> str:
        """Redact configured secrets and secret-looking key/value pairs, for log lines."""
        if not self.enabled or not text:
            return text

        sanitized = self.redact_secrets(text)
        sanitized = self._QUERY_SECRET_RE.sub(rf"\1{self.SECRET_PLACEHOLDER}", sanitized)
        sanitized = self._KV_SECRET_RE.sub(rf"\1{self.SECRET_PLACEHOLDER}", sanitized)
        return sanitized

    def redact_secrets(self, text: str) -> str:
        """Replace only the configured secrets, leaving urls and other text intact."""
        if not self.enabled or not text:
            return text

        sanitized = text
        for value in sorted(self._literal_secrets, key=len, reverse=True):
            sanitized = sanitized.replace(value, self.SECRET_PLACEHOLDER)
        return sanitized

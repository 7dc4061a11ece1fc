"""Backend dispatcher for sauce lookups."""

from pathlib import Path
from typing import Literal

from saucebot.config.schema import Config
from saucebot.sauce.errors import SauceError
from saucebot.sauce.formatting import format_google, format_saucenao
from saucebot.sauce.google import GoogleSauceFinder
from saucebot.sauce.saucenao import SaucenaoSauceFinder

SauceBackend = Literal["google", "saucenao"]
BACKENDS: tuple[SauceBackend, ...] = ("google", "saucenao")


class SauceClient:
    """Pick the backend for a lookup and render its result."""

    def __init__(self, config: Config, *, html: bool = False):
        self.config = config
        self.html = html
        self._google = GoogleSauceFinder(config.google, config.http)
        self._saucenao = SaucenaoSauceFinder(config.saucenao, config.http)

    async def find(self, image_path: Path, backend: str = "google") -> str:
        """Look up one image and return the formatted reply."""
        selected = (backend or "google").strip().lower()
        if selected not in BACKENDS:
            raise SauceError(f"unknown sauce backend: {backend}")

        if selected == "saucenao":
            ranked = await self._saucenao.resolve(image_path)
            return format_saucenao(
                ranked,
                low_similarity=self.config.saucenao.low_similarity_threshold,
                html=self.html,
            )

        result = await self._google.resolve(image_path)
        return format_google(result, html=self.html)

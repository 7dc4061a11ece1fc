"""Caller side of a sauce lookup: staging, logging and error replies."""

from pathlib import Path

from loguru import logger

from saucebot.config.schema import Config
from saucebot.sauce.client import SauceClient
from saucebot.sauce.errors import SauceError
from saucebot.utils.redaction import SensitiveOutputRedactor
from saucebot.utils.tempfiles import staged_image


class SauceService:
    """
    Answer "what is the sauce of this image?" with a reply text.

    Images given as bytes are written to a per-call temporary file that is
    removed afterwards; caller supplied paths are left alone. Lookup failures
    become the reply text and are logged.
    """

    def __init__(self, config: Config, *, html: bool = False, client: SauceClient | None = None):
        self.config = config
        self.client = client or SauceClient(config, html=html)
        self.redactor = SensitiveOutputRedactor(secrets=[config.saucenao.api_key])

    async def lookup(self, image: Path | str | bytes, backend: str = "google", *, requester: str = "cli") -> str:
        """Look up one image and return the reply, or the error message on failure."""
        logger.info("{} requested sauce from {}", requester, backend)

        if isinstance(image, bytes):
            with staged_image(image) as path:
                reply, ok = await self._lookup_path(path, backend, requester)
        else:
            reply, ok = await self._lookup_path(Path(image), backend, requester)

        if ok:
            logger.info("Sauce for {} found via {}", requester, backend)
        return reply

    async def lookup_or_raise(self, image_path: Path, backend: str = "google") -> str:
        """Same as ``lookup`` for a path, but propagate ``SauceError``."""
        try:
            return self.redactor.redact_secrets(await self.client.find(image_path, backend))
        except SauceError as e:
            raise type(e)(self.redactor.redact_secrets(str(e))) from e

    async def _lookup_path(self, path: Path, backend: str, requester: str) -> tuple[str, bool]:
        try:
            reply = await self.client.find(path, backend)
        except SauceError as e:
            logger.warning("[{}]: {}", requester, self.redactor.redact(str(e)))
            message = self.redactor.redact_secrets(str(e))
            return message, False
        return self.redactor.redact_secrets(reply), True

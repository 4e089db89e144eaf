"""Shared async HTTP client used by outbound integrations."""

from typing import Any, Optional

import httpx


class HttpClient:
    """Thin async wrapper around httpx.AsyncClient.

    Constructed once in the application lifespan and handed to each provider
    that needs outbound HTTP; closed on shutdown.
    """

    def __init__(
        self, timeout: float = 5.0, headers: Optional[dict[str, str]] = None
    ) -> None:
        self._client = httpx.AsyncClient(timeout=timeout, headers=headers)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._client.post(url, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

from typing import Any

import httpx

from recostrip.core.base_client import BaseClient
from recostrip.core.config import settings
from recostrip.core.version import __version__


class CatalogClient(BaseClient):
    """Fetches the raw product list from the remote catalog endpoint."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(
            timeout=timeout or settings.CATALOG_FETCH_TIMEOUT,
            max_retries=max_retries or settings.CATALOG_FETCH_RETRIES,
            headers={"User-Agent": f"recostrip/{__version__}", "Accept": "application/json"},
            transport=transport,
        )
        self.url = url or settings.CATALOG_URL

    async def fetch_products(self) -> Any:
        """Return the decoded JSON body. Raises on transport errors, bad status or non-JSON body."""
        return await self.get(self.url)

"""Top level Form3 API client."""

from typing import Optional

import httpx

from form3_client.client.http_client import HTTPClient
from form3_client.operations.account_operations import AccountOperations


class Form3Client:
    """Handles communication with the Form3 API.

    Holds the transport core and attaches one operations object per resource::

        async with Form3Client() as client:
            account, links = await client.accounts.fetch(account_id)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self.http_client = HTTPClient(base_url=base_url, http_client=http_client, timeout=timeout)
        self.accounts = AccountOperations(self.http_client)

    @property
    def base_url(self) -> str:
        return self.http_client.base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        self.http_client.base_url = value

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        await self.http_client.close()

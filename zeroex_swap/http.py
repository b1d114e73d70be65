from typing import Any, Dict, Optional
from httpx import AsyncBaseTransport, AsyncClient, BaseTransport, Client, Headers, Response

ZEROX_API_KEY_HEADER = "0x-api-key"

Params = Optional[Dict[str, Any]]

class ZeroExHttpClient:
    """HTTP client for making authenticated requests to the 0x API.

    Every request carries the API key header; the caller supplies the path and
    query parameters.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        transport: Optional[AsyncBaseTransport] = None,
        sync_transport: Optional[BaseTransport] = None,
    ):
        """Initialize a new ZeroExHttpClient.

        Args:
            base_url: The base URL of the 0x API for a given chain
            api_key: The API key sent in the `0x-api-key` header
            transport: Optional transport for the async client
            sync_transport: Optional transport for the sync client
        """
        self.async_client = AsyncClient(transport=transport)
        self.sync_client = Client(transport=sync_transport)
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key

    async def get(self, path: str, params: Params = None) -> Response:
        """Make a GET request without custom headers.

        Args:
            path: The API endpoint path
            params: Query parameters

        Returns:
            The API response
        """
        return await self.get_with_headers(path, params, Headers())

    def get_sync(self, path: str, params: Params = None) -> Response:
        """Make a synchronous GET request without custom headers."""
        return self.get_with_headers_sync(path, params, Headers())

    async def get_with_headers(self, path: str, params: Params, custom_headers: Headers) -> Response:
        """Make a GET request with custom headers.

        Args:
            path: The API endpoint path
            params: Query parameters
            custom_headers: Additional headers to include

        Returns:
            The API response
        """
        url = f"{self.base_url}{path}"
        headers = self._add_auth(custom_headers)
        return await self.async_client.get(url, params=params, headers=headers)

    def get_with_headers_sync(self, path: str, params: Params, custom_headers: Headers) -> Response:
        url = f"{self.base_url}{path}"
        headers = self._add_auth(custom_headers)
        return self.sync_client.get(url, params=params, headers=headers)

    async def aclose(self) -> None:
        await self.async_client.aclose()

    def close(self) -> None:
        self.sync_client.close()

    def _add_auth(self, headers: Headers) -> Headers:
        headers[ZEROX_API_KEY_HEADER] = self.api_key
        return headers

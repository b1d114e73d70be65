from dataclasses import dataclass
from typing import Any, Dict, Optional
from httpx import Headers, Response
from loguru import logger
from .errors import ZeroExClientError
from .http import ZeroExHttpClient
from .types import Quote, QuoteRequest

MAINNET_BASE_URL = "https://api.0x.org"
BASE_BASE_URL = "https://base.api.0x.org"

REQUEST_QUOTE_ROUTE = "/swap/v1/quote"

SKIP_VALIDATION_QUERY_PARAM = "skipValidation"
AFFILIATE_ADDRESS_QUERY_PARAM = "affiliateAddress"

@dataclass
class RequestQuoteOptions:
    skip_validation: bool = False
    affiliate_address: Optional[str] = None

    @classmethod
    def new(cls) -> "RequestQuoteOptions":
        return cls()

    def with_skip_validation(self, skip_validation: bool) -> "RequestQuoteOptions":
        self.skip_validation = skip_validation
        return self

    def with_affiliate_address(self, affiliate_address: str) -> "RequestQuoteOptions":
        self.affiliate_address = affiliate_address
        return self

    def build_query_params(self, request: QuoteRequest) -> Dict[str, str]:
        """
        Builds the query params for the quote request, including the options
        """
        params = request.to_query_params()
        if self.skip_validation:
            params[SKIP_VALIDATION_QUERY_PARAM] = "true"
        if self.affiliate_address:
            params[AFFILIATE_ADDRESS_QUERY_PARAM] = self.affiliate_address

        return params

class ZeroExClient:
    """Client for the 0x swap API.

    Fetches firm quotes that carry the calldata needed to execute a swap
    on-chain.
    """

    def __init__(self, api_key: str, base_url: str, http_client: Optional[ZeroExHttpClient] = None):
        """Initialize a new ZeroExClient.

        Args:
            api_key: The 0x API key
            base_url: The chain specific base URL of the 0x API
            http_client: Optional preconfigured HTTP client
        """
        self.http_client = http_client or ZeroExHttpClient(base_url, api_key)

    @classmethod
    def new_base_client(cls, api_key: str) -> "ZeroExClient":
        """Create a new client for the Base chain endpoint."""
        return cls(api_key, BASE_BASE_URL)

    @classmethod
    def new_mainnet_client(cls, api_key: str) -> "ZeroExClient":
        """Create a new client for the Ethereum mainnet endpoint."""
        return cls(api_key, MAINNET_BASE_URL)

    async def request_quote(self, request: QuoteRequest) -> Quote:
        """Request a quote for the given sell order.

        Args:
            request: The tokens and amount to quote

        Returns:
            The parsed quote

        Raises:
            ZeroExClientError: If the API answers with a non-2xx status
            httpx.RequestError: If no response was received
        """
        return await self.request_quote_with_options(request, RequestQuoteOptions())

    async def request_quote_with_options(self, request: QuoteRequest, options: RequestQuoteOptions) -> Quote:
        """Request a quote for the given sell order with custom options.

        Args:
            request: The tokens and amount to quote
            options: Custom options for the quote request

        Returns:
            The parsed quote

        Raises:
            ZeroExClientError: If the API answers with a non-2xx status
            httpx.RequestError: If no response was received
        """
        params = options.build_query_params(request)
        logger.info("Requesting quote {} with params {}", REQUEST_QUOTE_ROUTE, params)
        response = await self.http_client.get_with_headers(REQUEST_QUOTE_ROUTE, params, Headers())
        return Quote(**self._handle_response(response))

    def request_quote_sync(self, request: QuoteRequest) -> Quote:
        """Request a quote synchronously.

        Args:
            request: The tokens and amount to quote

        Returns:
            The parsed quote
        """
        params = RequestQuoteOptions().build_query_params(request)
        logger.info("Requesting quote {} with params {}", REQUEST_QUOTE_ROUTE, params)
        response = self.http_client.get_with_headers_sync(REQUEST_QUOTE_ROUTE, params, Headers())
        return Quote(**self._handle_response(response))

    async def aclose(self) -> None:
        await self.http_client.aclose()
        self.http_client.close()

    def close(self) -> None:
        self.http_client.close()

    def _handle_response(self, response: Response) -> Dict[str, Any]:
        """Handle an API response.

        Args:
            response: The API response to handle

        Returns:
            The decoded JSON body

        Raises:
            ZeroExClientError: If the response indicates an error
        """
        if response.is_success:
            return response.json()

        try:
            body = response.json()
        except ValueError:
            body = response.text
        raise ZeroExClientError(
            response.text,
            status_code=response.status_code,
            headers=response.headers,
            body=body,
        )

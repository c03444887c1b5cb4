"""
OrderDesk REST API client.
Builds endpoint URLs and authentication headers, and performs single JSON requests.
No retries: transport errors and non-2xx responses propagate to the caller.
"""

from typing import Any

import httpx
import structlog

from orderdesk_datastore.datastore.orderdesk.models import Credentials

logger = structlog.get_logger()

DEFAULT_DOMAIN = "app.orderdesk.me"
DEFAULT_API_PREFIX = "api/v2/"


class OrderDeskAPIClient:
    """Async client for the OrderDesk REST API."""

    def __init__(
        self,
        credentials: Credentials,
        domain: str = DEFAULT_DOMAIN,
        api_prefix: str = DEFAULT_API_PREFIX,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the OrderDesk API client.

        Args:
            credentials: Resolved store id and API key
            domain: OrderDesk host
            api_prefix: API version prefix, with trailing slash
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.credentials = credentials
        self.domain = domain
        self.api_prefix = api_prefix
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def build_endpoint(self, path: str) -> str:
        """Return the full URL of an endpoint path."""
        return f"https://{self.domain}/{self.api_prefix}{path}"

    def get_default_header(self) -> dict[str, str]:
        """Return the headers OrderDesk needs to authenticate a request."""
        return {
            "Content-Type": "application/json",
            "ORDERDESK-API-KEY": self.credentials.key,
            "ORDERDESK-STORE-ID": self.credentials.id,
        }

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json_body: Any = None,
    ) -> Any:
        """
        Send one request to OrderDesk and return the parsed JSON body.

        Args:
            method: HTTP method
            path: Endpoint path relative to the API prefix
            params: Optional query parameters
            json_body: Optional JSON body

        Returns:
            Parsed JSON response

        Raises:
            httpx.RequestError: If the request could not be sent
            httpx.HTTPStatusError: If OrderDesk returned a non-success status
        """
        client = await self._get_client()
        url = self.build_endpoint(path)
        kwargs: dict[str, Any] = {"headers": self.get_default_header()}
        if params is not None:
            kwargs["params"] = params
        if json_body is not None:
            kwargs["json"] = json_body

        try:
            response = await client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "OrderDesk API error",
                method=method,
                path=path,
                status_code=e.response.status_code,
                body=e.response.text[:500],
            )
            raise
        except httpx.RequestError as e:
            logger.error(
                "OrderDesk API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise

        return response.json()

    async def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def put(self, path: str, json_body: Any) -> Any:
        return await self.request("PUT", path, json_body=json_body)

    async def post(self, path: str, json_body: Any) -> Any:
        return await self.request("POST", path, json_body=json_body)

"""Base HTTP client for talking to the Tinyblog API."""

from typing import Any

import httpx


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidInputError(APIError):
    """Raised when the server rejects the request body (400)."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, status_code=400)


class AuthenticationError(APIError):
    """Raised when the server rejects the credentials or token (401)."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, status_code=401)


class NotFoundError(APIError):
    """Raised when a resource is not found (404)."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class BaseAPIClient:
    """HTTP plumbing shared by API clients.

    Owns a lazily created ``httpx.AsyncClient`` and turns error responses
    into the exceptions above, using the server's ``detail`` message.
    """

    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        """Initialize the base API client.

        Args:
            base_url: The base URL for the API.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def default_headers(self) -> dict[str, str]:
        """Return default headers for API requests."""
        return {"Accept": "application/json"}

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.default_headers,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        endpoint: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make an HTTP request to the API.

        Args:
            method: HTTP method (GET, POST, etc.).
            endpoint: API endpoint path.
            json: JSON request body.
            headers: Additional headers to include.

        Returns:
            Decoded JSON response.

        Raises:
            InvalidInputError: If the request is rejected (400).
            AuthenticationError: If authentication fails (401).
            NotFoundError: If the resource is not found (404).
            APIError: For other HTTP errors and transport failures.
        """
        client = await self._get_client()
        url = f"{endpoint.lstrip('/')}"

        request_headers = dict(self.default_headers)
        if headers:
            request_headers.update(headers)

        try:
            response = await client.request(
                method=method,
                url=url,
                json=json,
                headers=request_headers,
            )
        except httpx.TimeoutException as e:
            raise APIError(f"Request timed out: {e}") from e
        except httpx.RequestError as e:
            raise APIError(f"Request failed: {e}") from e

        return self._handle_response(response)

    @staticmethod
    def _error_detail(response: httpx.Response) -> str | None:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and isinstance(body.get("detail"), str):
            return body["detail"]
        return None

    def _handle_response(self, response: httpx.Response) -> Any:
        """Handle the HTTP response.

        Args:
            response: The HTTP response object.

        Returns:
            Decoded JSON response.

        Raises:
            InvalidInputError: If the request is rejected (400).
            AuthenticationError: If authentication fails (401).
            NotFoundError: If the resource is not found (404).
            APIError: For other HTTP errors.
        """
        if response.status_code >= 400:
            detail = self._error_detail(response)

            if response.status_code == 400:
                raise InvalidInputError(detail or "Invalid input")
            if response.status_code == 401:
                raise AuthenticationError(detail or "Not authenticated")
            if response.status_code == 404:
                raise NotFoundError(detail or "Resource not found")

            raise APIError(
                f"API error: {detail or response.text}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise APIError(f"Invalid JSON response: {e}") from e

    async def __aenter__(self) -> "BaseAPIClient":
        """Async context manager entry."""
        await self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

"""Custom exception classes for the shoprest library."""

import httpx


class ShopRestError(Exception):
    """Base exception class for all shoprest errors."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            response: Optional httpx.Response object associated with the error.
            request: Optional httpx.Request object associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request

    def __str__(self) -> str:
        if self.response is not None:
            try:
                url_info = self.response.request.url
            except RuntimeError:
                # httpx raises when the response was built without a request
                url_info = "N/A"
            return (
                f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {self.request.url})"
        return self.message


class ConfigurationError(ShopRestError):
    """Represents a missing or invalid shop domain, access token or setting."""

    def __init__(self, message: str):
        super().__init__(message, response=None)


class InvalidArgumentError(ShopRestError):
    """Raised for structurally invalid caller input, before any request is sent.

    Examples are updating an entity without an id, creating one that already
    has an id, or passing only half of a parent resource scope.
    """

    def __init__(self, message: str):
        super().__init__(message, response=None)


class ApiError(ShopRestError):
    """Represents a non-2xx response returned by the Shopify API.

    Attributes:
        status_code: The HTTP status code of the response.
        body: The raw response body. Platform error payloads are not parsed.
    """

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(message, response=response, request=request)
        if status_code is None and response is not None:
            status_code = response.status_code
        if body is None and response is not None:
            body = response.text
        self.status_code = status_code
        self.body = body


class NotFoundError(ApiError):
    """Represents a resource not found error (404 Not Found)."""


class RateLimitError(ApiError):
    """Represents hitting the API rate limit (429 Too Many Requests)."""


class MalformedResponseError(ShopRestError):
    """Raised when a response lacks the expected root element or cannot be parsed."""


class TimeoutError(ShopRestError):
    """Represents a request timeout error."""

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class NetworkError(ShopRestError):
    """Represents a network connection error (DNS failure, connection refused, ...)."""

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class ShopRestRequestError(ShopRestError):
    """Represents any other error raised by the transport while sending a request."""

from typing import Protocol

import httpx

from .constants import ACCESS_TOKEN_HEADER
from .exceptions import ConfigurationError
from .log_config import logger


class AuthStrategy(Protocol):
    """Protocol defining the interface for authentication strategies.

    Concrete implementations add authentication information (e.g. headers)
    to an outgoing HTTP request.
    """

    async def async_authenticate(self, request: httpx.Request) -> None:
        """
        Asynchronously modifies the request to add authentication information.

        Args:
            request: The httpx.Request object to modify.
        """
        ...

    async def async_close(self) -> None:
        """
        Asynchronously closes any underlying resources used by the auth strategy.
        This method should be idempotent.
        """
        ...


class AccessTokenAuth:
    """Implements AuthStrategy using a shop's Admin API access token.

    Shopify expects the token in the ``X-Shopify-Access-Token`` header rather
    than as a Bearer token.

    Attributes:
        _token: The Admin API access token.
    """

    def __init__(self, token: str | None):
        """Initializes AccessTokenAuth with the provided access token.

        Args:
            token: The Admin API access token.

        Raises:
            ConfigurationError: If the token is None or blank.
        """
        if not token or not token.strip():
            raise ConfigurationError("AccessTokenAuth requires a non-empty 'token'.")
        self._token: str = token.strip()
        logger.debug("AccessTokenAuth initialized.")

    async def async_authenticate(self, request: httpx.Request) -> None:
        """Adds the access token header to the request."""
        logger.trace("Authenticating request using AccessTokenAuth.")
        request.headers[ACCESS_TOKEN_HEADER] = self._token

    async def async_close(self) -> None:
        """No resources to close for AccessTokenAuth, this method is a no-op."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(token='***')"

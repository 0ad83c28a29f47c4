"""Asynchronous client for the Shopify Admin REST API.

This module provides the ShopifyApiClient class, which owns the shared request
pipeline used by every resource client: it builds request descriptors for a
shop, sends them through an execution policy, maps error statuses onto the
shoprest exception hierarchy, and unwraps the named root element of each
response.
"""

import re
import ssl
from typing import Any, Self, TypeVar

import certifi
import httpx

from .auth import AccessTokenAuth, AuthStrategy
from .config import ShopSettings, get_settings
from .constants import ADMIN_API_PATH_TEMPLATE, CLIENT_HEADERS, MYSHOPIFY_DOMAIN
from .exceptions import (
    ApiError,
    ConfigurationError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ShopRestRequestError,
    TimeoutError,
)
from .log_config import logger
from .policies import DefaultExecutionPolicy, ExecutionPolicy, RetryExecutionPolicy
from .resources import MetaFieldsClient, RedirectsClient
from .types import RequestData
from .unwrapper import ResponseUnwrapper, RootElementUnwrapper

T = TypeVar("T")

_SHOP_NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9-]*$")


def build_shop_base_url(shop_domain: str | None, api_version: str | None) -> str:
    """Build the Admin API base URL for a shop.

    Accepts a bare shop name (``my-shop``), a full domain
    (``my-shop.myshopify.com``) or a URL (``https://my-shop.myshopify.com/admin``).

    Args:
        shop_domain: The shop name, domain or URL.
        api_version: The Admin API version, e.g. ``2024-10``.

    Returns:
        str: ``https://{shop}.myshopify.com/admin/api/{version}`` without a
            trailing slash.

    Raises:
        ConfigurationError: If either value is missing or the domain is not a
            ``*.myshopify.com`` host.
    """
    if not shop_domain or not shop_domain.strip():
        raise ConfigurationError("A shop domain is required.")
    if not api_version or not api_version.strip():
        raise ConfigurationError("An API version is required.")

    raw = shop_domain.strip()
    if "://" not in raw:
        raw = f"https://{raw}"
    try:
        host = httpx.URL(raw).host.lower()
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Invalid shop domain '{shop_domain}': {e}") from e

    suffix = f".{MYSHOPIFY_DOMAIN}"
    shop_name = host[: -len(suffix)] if host.endswith(suffix) else host
    if not _SHOP_NAME_PATTERN.match(shop_name):
        raise ConfigurationError(
            f"Invalid shop domain '{shop_domain}': expected a {MYSHOPIFY_DOMAIN} shop."
        )

    path = ADMIN_API_PATH_TEMPLATE.format(version=api_version.strip())
    return f"https://{shop_name}{suffix}{path}".rstrip("/")


class ShopifyApiClient:
    """Asynchronous client for one shop's Admin REST API.

    The client holds the immutable shop configuration and the shared
    ``httpx.AsyncClient``. Resource clients (``metafields``, ``redirects``)
    compose its two building blocks:

    - :meth:`prepare_request` builds a :class:`RequestData` for a relative path.
    - :meth:`execute` sends it and returns the payload under a root element.

    Operations are independent coroutines; any number may run concurrently.
    Nothing is retried unless a retrying execution policy is configured.

    Typical usage:
    ```python
    async with ShopifyApiClient(shop_domain="my-shop", access_token="shpat_...") as client:
        fields = await client.metafields.list(resource_type="products", resource_id=123)
    ```

    Attributes:
        _settings: Configuration settings for the client.
        _base_url: The shop's Admin API base URL.
        _auth_strategy: Authentication strategy instance.
        _execution_policy: Strategy deciding how often a request is sent.
        _response_unwrapper: Extracts and validates root-element payloads.
        _http_client: The underlying httpx.AsyncClient for making requests.
        _should_close_client: Flag indicating if this instance owns the _http_client.
    """

    def __init__(
        self,
        settings: ShopSettings | None = None,
        auth_strategy: AuthStrategy | None = None,
        *,
        shop_domain: str | None = None,
        access_token: str | None = None,
        api_version: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        execution_policy: ExecutionPolicy | None = None,
        response_unwrapper: ResponseUnwrapper | None = None,
    ):
        """Initialize the ShopifyApiClient.

        Explicit arguments take precedence over values in ``settings``.

        Args:
            settings: Optional settings; global settings are loaded via
                ``get_settings()`` when omitted.
            auth_strategy: Optional authentication strategy. Defaults to
                AccessTokenAuth built from the resolved access token.
            shop_domain: Shop name, domain or URL.
            access_token: Admin API access token.
            api_version: Admin API version.
            http_client: Optional pre-configured httpx.AsyncClient instance.
            execution_policy: Optional policy; defaults to a single attempt, or
                RetryExecutionPolicy when ``settings.retry_requests`` is set.
            response_unwrapper: Optional unwrapper; defaults to RootElementUnwrapper.

        Raises:
            ConfigurationError: If the shop domain, API version or access token
                is missing or invalid.
        """
        self._settings: ShopSettings = settings or get_settings()

        self._base_url: str = build_shop_base_url(
            shop_domain or self._settings.shop_domain,
            api_version or self._settings.api_version,
        )
        self._auth_strategy: AuthStrategy = auth_strategy or AccessTokenAuth(
            access_token or self._settings.access_token
        )
        logger.info(
            f"Using authentication strategy: {type(self._auth_strategy).__name__}"
        )

        if execution_policy is not None:
            self._execution_policy: ExecutionPolicy = execution_policy
        elif self._settings.retry_requests:
            self._execution_policy = RetryExecutionPolicy(
                max_retries=self._settings.max_retries,
                backoff_factor=self._settings.backoff_factor,
            )
        else:
            self._execution_policy = DefaultExecutionPolicy()

        self._response_unwrapper: ResponseUnwrapper = (
            response_unwrapper or RootElementUnwrapper()
        )

        self._should_close_client = http_client is None  # Close only if we created it
        self._http_client = http_client or self._create_default_http_client()

        self._metafields = MetaFieldsClient(api_client=self)
        self._redirects = RedirectsClient(api_client=self)

        logger.debug(f"ShopifyApiClient initialized for {self._base_url}")

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create a default httpx.AsyncClient with the configured timeout.

        Returns:
            httpx.AsyncClient: HTTP client verifying TLS against the certifi bundle.
        """
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        return httpx.AsyncClient(
            timeout=self._settings.request_timeout,
            verify=ssl_context,
        )

    @property
    def base_url(self) -> str:
        """The shop's Admin API base URL."""
        return self._base_url

    @property
    def metafields(self) -> MetaFieldsClient:
        """Provides access to the MetaFieldsClient."""
        return self._metafields

    @property
    def redirects(self) -> RedirectsClient:
        """Provides access to the RedirectsClient."""
        return self._redirects

    def prepare_request(self, path: str) -> RequestData:
        """Build a request descriptor for a path relative to the shop's API URL.

        No I/O happens here. Authentication is applied when the descriptor is
        sent.

        Args:
            path: Relative path, e.g. ``metafields.json`` or
                ``products/123/metafields.json``.

        Returns:
            RequestData: Descriptor with the full URL, default headers and an
                empty query-parameter list.
        """
        return RequestData(
            url=f"{self._base_url}/{path.lstrip('/')}",
            headers={**CLIENT_HEADERS, "User-Agent": self._settings.user_agent},
        )

    async def execute(
        self,
        request_data: RequestData,
        method: str,
        *,
        json_data: Any | None = None,
        root_element: str | None = None,
        response_type: type[T] | None = None,
    ) -> T | Any | None:
        """Send a prepared request and unwrap its payload.

        Args:
            request_data: Descriptor from :meth:`prepare_request`.
            method: HTTP method (GET, POST, PUT, DELETE).
            json_data: Optional JSON request body.
            root_element: Name of the top-level property holding the payload.
                When None, the response body is ignored and None is returned.
            response_type: Shape to validate the payload into (``int``, a
                model class, ``list[Model]``). When None, the raw value is returned.

        Returns:
            The validated payload, the raw payload, or None.

        Raises:
            ApiError: For non-2xx responses (NotFoundError for 404,
                RateLimitError for 429).
            MalformedResponseError: If the body is not JSON, lacks
                ``root_element`` or does not validate into ``response_type``.
            TimeoutError, NetworkError, ShopRestRequestError: For transport failures.
        """
        request_data = request_data.model_copy(
            update={"method": method.upper(), "json_data": json_data}
        )
        response = await self._execution_policy.run(request_data, self._send)

        if root_element is None:
            return None

        try:
            try:
                body = response.json()
            except ValueError as e:
                raise MalformedResponseError(
                    f"Response body is not valid JSON: {e}"
                ) from e
            payload = self._response_unwrapper.unwrap(body, root_element)
            if response_type is None:
                return payload
            return self._response_unwrapper.deserialize(payload, response_type)
        except MalformedResponseError as e:
            e.response = response
            logger.error(f"Malformed response for {request_data.url}: {e.message}")
            raise

    async def _send(self, request_data: RequestData) -> httpx.Response:
        """Send one request attempt and check its status.

        Args:
            request_data: The request to send.

        Returns:
            httpx.Response: A response with a 2xx status.

        Raises:
            ApiError: For non-2xx responses.
            TimeoutError: If the request times out.
            NetworkError: For network-related errors.
            ShopRestRequestError: For other httpx request errors.
        """
        request = request_data.build_request()
        await self._auth_strategy.async_authenticate(request)

        logger.debug(f"Sending request: {request.method} {request.url}")
        if request.content:
            logger.trace(f"Request Body: {request.content.decode()}")

        try:
            response = await self._http_client.send(request)
        except httpx.TimeoutException as e:
            logger.error(f"Request timed out: {request.url}")
            raise TimeoutError("Request timed out", request=request) from e
        except httpx.NetworkError as e:
            logger.error(f"Network error occurred for {request.url}: {e}")
            raise NetworkError(
                f"Network error for {request.url}: {e}", request=request
            ) from e
        except httpx.RequestError as e:
            logger.error(f"HTTP request error for {request.url}: {e}")
            raise ShopRestRequestError(
                f"HTTP request error for {request.url}: {e}", request=request
            ) from e

        logger.debug(f"Received response: {response.status_code} for {request.url}")
        if not response.is_success:
            raise self._error_for_response(response, request)
        return response

    @staticmethod
    def _error_for_response(
        response: httpx.Response, request: httpx.Request
    ) -> ApiError:
        """Map a non-2xx response onto the matching ApiError subclass."""
        message = f"API request failed with status {response.status_code}"
        logger.error(f"{message}: {request.method} {request.url}")
        if response.status_code == httpx.codes.NOT_FOUND:
            return NotFoundError(message, response=response, request=request)
        if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
            return RateLimitError(
                "API rate limit exceeded.", response=response, request=request
            )
        return ApiError(message, response=response, request=request)

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._should_close_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            logger.debug("ShopifyApiClient internal HTTP client closed.")
        await self._auth_strategy.async_close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.aclose()

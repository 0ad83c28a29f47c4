# shoprest/types.py
"""Core type definitions for the shoprest library.

This module defines the request descriptor handed from the request builder to
the executor, and the type alias for the send callable used by execution
policies.
"""

from collections.abc import Awaitable, Callable, Iterable
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

QueryParams = list[tuple[str, str]]


class RequestData(BaseModel):
    """Describes a single HTTP request before it is sent.

    Query parameters are an ordered list of pairs so that a key may repeat.
    """

    method: str = "GET"
    url: str
    params: QueryParams = Field(default_factory=list)
    json_data: Any | None = None
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    def add_param(self, name: str, value: str) -> None:
        """Appends a single query parameter."""
        self.params.append((name, value))

    def add_params(self, pairs: Iterable[tuple[str, str]]) -> None:
        """Appends query parameters, keeping their order."""
        self.params.extend(pairs)

    def build_request(self) -> httpx.Request:
        """Builds an httpx.Request object from the stored data."""
        return httpx.Request(
            method=self.method,
            url=self.url,
            params=self.params or None,
            json=self.json_data,
            headers=self.headers,
        )


SendCallable = Callable[[RequestData], Awaitable[httpx.Response]]
"""Type alias for the coroutine function an execution policy uses to send a request.

Args:
    request_data (RequestData): The prepared request descriptor.
Return:
    httpx.Response: A response with a 2xx status. Non-2xx responses and
        transport failures are raised as shoprest exceptions.
"""

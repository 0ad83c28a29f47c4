# shoprest/unwrapper.py
"""Root-element unwrapping for Shopify REST responses.

Shopify nests every payload under one named top-level property:

```json
{"metafield": {"id": 1, "key": "a"}}
{"metafields": [{"id": 1}, {"id": 2}]}
{"count": 2}
```

The unwrapper pulls the value out from under that key and validates it into
the shape the caller asked for.
"""

from functools import lru_cache
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .exceptions import MalformedResponseError

T = TypeVar("T")


@lru_cache(maxsize=64)
def _adapter_for(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


@runtime_checkable
class ResponseUnwrapper(Protocol):
    """Protocol for extracting and validating a payload from a response body."""

    def unwrap(self, response_json: Any, root_element: str) -> Any:
        """Return the raw value stored under ``root_element``."""
        ...

    def deserialize(self, payload: Any, response_type: type[T]) -> T:
        """Validate ``payload`` into ``response_type``."""
        ...


class RootElementUnwrapper:
    """Shopify implementation of the :class:`ResponseUnwrapper` protocol."""

    def unwrap(self, response_json: Any, root_element: str) -> Any:
        """Extract the value stored under ``root_element``.

        Args:
            response_json: The decoded JSON body.
            root_element: Name of the expected top-level property.

        Returns:
            Any: The raw JSON value under ``root_element``.

        Raises:
            MalformedResponseError: If the body is not an object or lacks the key.
        """
        if not isinstance(response_json, dict):
            raise MalformedResponseError(
                f"Expected a JSON object with root element '{root_element}', "
                f"got {type(response_json).__name__}"
            )
        if root_element not in response_json:
            raise MalformedResponseError(
                f"Response is missing the root element '{root_element}' "
                f"(found: {', '.join(sorted(response_json)) or 'nothing'})"
            )
        return response_json[root_element]

    def deserialize(self, payload: Any, response_type: type[T]) -> T:
        """Validate ``payload`` into ``response_type`` (e.g. ``int``, a model, ``list[Model]``).

        Raises:
            MalformedResponseError: If the payload does not fit ``response_type``.
        """
        try:
            return _adapter_for(response_type).validate_python(payload)
        except PydanticValidationError as e:
            raise MalformedResponseError(
                f"Could not deserialize payload into {response_type}: {e}"
            ) from e

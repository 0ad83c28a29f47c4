"""Pydantic filter models for list and count requests.

Each filter is a bag of optional query parameters. Only fields the caller set
explicitly, and did not set to ``None`` or an empty list, are sent; everything
else is left out of the query string entirely. Naive datetimes are sent as UTC.
"""

from collections.abc import Sequence
from datetime import UTC, date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


def format_parameter(value: Any) -> str:
    """Formats a filter value the way the Admin API expects it in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)  # naive values are taken as UTC
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Sequence) and not isinstance(value, str):
        return ",".join(format_parameter(item) for item in value)
    return str(value)


class Parameterizable(BaseModel):
    """Base class for objects that serialize themselves into query parameters."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_parameters(self) -> list[tuple[str, str]]:
        """Returns one ``(name, value)`` pair per explicitly set field.

        Pairs follow field declaration order, parents first. Field aliases,
        where declared, are used as parameter names.
        """
        parameters: list[tuple[str, str]] = []
        for name, field in type(self).model_fields.items():
            if name not in self.model_fields_set:
                continue
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, Sequence) and not isinstance(value, str) and not value:
                continue
            parameters.append((field.alias or name, format_parameter(value)))
        return parameters


class CountFilter(Parameterizable):
    """Options for filtering count requests by creation and update time."""

    created_at_min: datetime | None = None
    created_at_max: datetime | None = None
    updated_at_min: datetime | None = None
    updated_at_max: datetime | None = None


class ListFilter(CountFilter):
    """Options for filtering and paging list requests."""

    limit: int | None = None
    page: int | None = None
    since_id: int | None = None
    fields: list[str] | None = None
    order: str | None = None


class MetaFieldFilter(ListFilter):
    """Options for filtering metafield list and count results."""

    namespace: str | None = None
    key: str | None = None
    value_type: str | None = None


class RedirectFilter(ListFilter):
    """Options for filtering redirect list and count results."""

    path: str | None = None
    target: str | None = None

"""Persisted record schemas - the on-disk contract."""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer


def as_utc(value: datetime) -> datetime:
    """Normalize to an aware UTC datetime. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with microseconds, e.g. 2026-10-19T08:30:00.000000Z."""
    value = as_utc(value)
    # strftime %Y drops the zero padding for years below 1000 on some platforms
    return f"{value.year:04d}-{value:%m-%dT%H:%M:%S.%f}Z"


UtcTimestamp = Annotated[
    datetime,
    AfterValidator(as_utc),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]


class InventoryItem(BaseModel):
    """Immutable inventory log record."""
    id: int
    name: str
    quantity: int
    date_added: UtcTimestamp

    model_config = ConfigDict(frozen=True)

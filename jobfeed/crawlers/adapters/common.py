from __future__ import annotations
from datetime import datetime, timezone
from typing import TypeVar

from bs4 import Tag
from pydantic import BaseModel

from jobfeed.crawlers.base import FeedFormatError
from jobfeed.crawlers.http_helpers import rss_soup

WireT = TypeVar("WireT", bound=BaseModel)


def parse_datetime(raw: str, fmt: str) -> datetime | None:
    """Parse ``raw`` with a strptime pattern, ``None`` when it does not match.

    Patterns without ``%z`` are read as UTC.
    """
    if not raw:
        return None
    try:
        parsed = datetime.strptime(raw, fmt)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def rss_items(raw: bytes) -> list[Tag]:
    try:
        soup = rss_soup(raw)
    except Exception as exc:  # noqa: BLE001
        raise FeedFormatError(f"payload is not XML: {exc}") from exc
    rss = soup.find("rss", recursive=False)
    if rss is None:
        raise FeedFormatError("payload has no <rss> root element")
    channel = rss.find("channel", recursive=False)
    if channel is None:
        raise FeedFormatError("<rss> has no <channel> element")
    return channel.find_all("item", recursive=False)


def read_item(item: Tag, wire_cls: type[WireT]) -> WireT:
    """Fill a wire model from the direct children of an RSS ``<item>``.

    Each model field is looked up by its alias (the XML element name). Missing
    elements keep the model default.
    """
    data: dict[str, str] = {}
    for name, field in wire_cls.model_fields.items():
        tag_name = field.alias or name
        el = item.find(tag_name, recursive=False)
        if el is not None:
            data[tag_name] = el.get_text()
    return wire_cls.model_validate(data)

from __future__ import annotations
from bs4 import BeautifulSoup
import httpx

from jobfeed.core.config import settings


def fetch_bytes(url: str, timeout: float | None = None, transport: httpx.BaseTransport | None = None) -> bytes:
    headers = {"User-Agent": settings.user_agent}
    with httpx.Client(
        timeout=timeout if timeout is not None else settings.fetch_timeout,
        follow_redirects=True,
        headers=headers,
        transport=transport,
    ) as client:
        resp = client.get(url)
        resp.raise_for_status()
        return resp.content


def rss_soup(raw: bytes) -> BeautifulSoup:
    return BeautifulSoup(raw, "xml")

from __future__ import annotations
from dataclasses import dataclass

from jobfeed.schemas.job import JobRecord


class FeedFormatError(ValueError):
    """The payload envelope could not be decoded at all."""


class FeedAdapter:
    source_name: str

    def parse(self, raw: bytes) -> list[JobRecord]:
        raise NotImplementedError


@dataclass(frozen=True)
class SourceSpec:
    url: str
    adapter: FeedAdapter

    @property
    def name(self) -> str:
        return self.adapter.source_name

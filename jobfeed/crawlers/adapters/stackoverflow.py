from __future__ import annotations
from pydantic import BaseModel, Field

from jobfeed.crawlers.adapters.common import parse_datetime, read_item, rss_items
from jobfeed.crawlers.base import FeedAdapter
from jobfeed.schemas.job import JobRecord

DATE_FORMAT = "%a, %d %b %Y %H:%M:%S Z"


class _StackOverflowItem(BaseModel):
    guid: str = ""
    pub_date: str = Field(default="", alias="pubDate")
    title: str = ""
    link: str = ""
    description: str = ""


class StackOverflowAdapter(FeedAdapter):
    source_name = "Stack Overflow"

    def parse(self, raw: bytes) -> list[JobRecord]:
        jobs: list[JobRecord] = []
        for el in rss_items(raw):
            item = read_item(el, _StackOverflowItem)
            jobs.append(
                JobRecord(
                    id=item.guid,
                    created_at_raw=item.pub_date,
                    created_datetime=parse_datetime(item.pub_date, DATE_FORMAT),
                    position=item.title,
                    apply_url=item.link,
                    source=self.source_name,
                    description=item.description,
                )
            )
        return jobs

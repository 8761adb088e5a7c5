from __future__ import annotations
from pydantic import BaseModel, Field

from jobfeed.crawlers.adapters.common import parse_datetime, read_item, rss_items
from jobfeed.crawlers.base import FeedAdapter
from jobfeed.schemas.job import JobRecord

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


class _RemoteOkItem(BaseModel):
    guid: str = ""
    pub_date: str = Field(default="", alias="pubDate")
    title: str = ""
    company: str = ""
    link: str = ""
    description: str = ""


class RemoteOkAdapter(FeedAdapter):
    source_name = "RemoteOK Jobs"

    def parse(self, raw: bytes) -> list[JobRecord]:
        jobs: list[JobRecord] = []
        for el in rss_items(raw):
            item = read_item(el, _RemoteOkItem)
            # Description is kept verbatim, only the short fields are trimmed.
            jobs.append(
                JobRecord(
                    id=item.guid.strip(),
                    created_at_raw=item.pub_date,
                    created_datetime=parse_datetime(item.pub_date, DATE_FORMAT),
                    position=item.title.strip(),
                    company=item.company.strip(),
                    apply_url=item.link.strip(),
                    source=self.source_name.strip(),
                    description=item.description,
                )
            )
        return jobs

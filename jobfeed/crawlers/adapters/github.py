from __future__ import annotations
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from jobfeed.crawlers.adapters.common import parse_datetime
from jobfeed.crawlers.base import FeedAdapter, FeedFormatError
from jobfeed.schemas.job import JobRecord

DATE_FORMAT = "%a %b %d %H:%M:%S UTC %Y"


class _GitHubJob(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str = ""
    created_at: str = ""
    company: str = ""
    company_url: str = ""
    location: str = ""
    # GitHub Jobs itself names these "title" and "url".
    position: str = Field(default="", validation_alias=AliasChoices("position", "title"))
    how_to_apply: str = Field(default="", validation_alias=AliasChoices("how_to_apply", "url"))
    description: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


_JOB_LIST = TypeAdapter(list[_GitHubJob])


class GitHubJobsAdapter(FeedAdapter):
    source_name = "Github Jobs"

    def parse(self, raw: bytes) -> list[JobRecord]:
        try:
            items = _JOB_LIST.validate_json(raw)
        except ValidationError as exc:
            raise FeedFormatError(f"invalid job list payload: {exc.error_count()} error(s)") from exc

        return [
            JobRecord(
                id=item.id,
                created_at_raw=item.created_at,
                created_datetime=parse_datetime(item.created_at, DATE_FORMAT),
                company=item.company,
                company_url=item.company_url,
                location=item.location,
                position=item.position,
                apply_url=item.how_to_apply,
                source=self.source_name,
                description=item.description,
            )
            for item in items
        ]

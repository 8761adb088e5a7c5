from __future__ import annotations
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class JobRecord(BaseModel):
    """A job posting normalized from any feed.

    Attribute names are the Python-side names; aliases are the keys written to
    the ``jobs.json`` artifact. Either form is accepted when building a record.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    created_at_raw: str = Field(default="", alias="created_at")
    created_datetime: datetime | None = None
    company: str = ""
    company_url: str = ""
    location: str = ""
    position: str = ""
    apply_url: str = Field(default="", alias="how_to_apply")
    source: str = ""
    description: str = ""

    def to_output(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

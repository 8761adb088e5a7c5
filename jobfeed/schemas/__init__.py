from __future__ import annotations
from jobfeed.schemas.job import JobRecord

__all__ = ["JobRecord"]

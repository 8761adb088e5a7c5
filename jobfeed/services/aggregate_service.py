from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
import logging
import time
from typing import Callable, Iterable

from jobfeed.crawlers.base import SourceSpec
from jobfeed.crawlers.http_helpers import fetch_bytes
from jobfeed.schemas.job import JobRecord

logger = logging.getLogger(__name__)

FetchFn = Callable[[str], bytes]


@dataclass
class SourceOutcome:
    name: str
    url: str
    records: list[JobRecord] = field(default_factory=list)
    error: str = ""

    @property
    def status(self) -> str:
        return "failed" if self.error else "success"


@dataclass
class AggregateResult:
    records: list[JobRecord]
    outcomes: list[SourceOutcome]
    elapsed_seconds: float = 0.0

    @property
    def failed_sources(self) -> list[str]:
        return [o.name for o in self.outcomes if o.status == "failed"]

    @property
    def source_stats(self) -> list[dict]:
        return [
            {
                "source": o.name,
                "url": o.url,
                "fetched": len(o.records),
                "status": o.status,
                "error": o.error,
            }
            for o in self.outcomes
        ]

    def summary(self) -> dict:
        return {
            "records": len(self.records),
            "failed_sources": self.failed_sources,
            "source_stats": self.source_stats,
            "elapsed_seconds": round(self.elapsed_seconds, 3),
        }


def _run_source(spec: SourceSpec, fetch: FetchFn) -> SourceOutcome:
    logger.info("Fetching URL: %s", spec.url)
    try:
        raw = fetch(spec.url)
        records = spec.adapter.parse(raw)
    except Exception as exc:  # noqa: BLE001
        logger.error("Source %s failed: %s", spec.name, exc)
        return SourceOutcome(name=spec.name, url=spec.url, error=str(exc)[:2000] or type(exc).__name__)

    logger.info("Source %s returned %d records", spec.name, len(records))
    return SourceOutcome(name=spec.name, url=spec.url, records=list(records))


def run_aggregation(
    specs: Iterable[SourceSpec],
    fetch: FetchFn | None = None,
    max_workers: int | None = None,
) -> AggregateResult:
    """Fetch and parse every source in its own thread and merge the results.

    Each worker builds a private list of records; merging happens here, after
    all workers have finished. A source that fails to fetch or parse
    contributes no records and is reported in the result instead of raising.
    """
    fetch = fetch or fetch_bytes
    specs = list(specs)
    start = time.perf_counter()

    outcomes: list[SourceOutcome] = []
    if specs:
        with ThreadPoolExecutor(max_workers=max_workers or len(specs), thread_name_prefix="feed") as pool:
            futures = [pool.submit(_run_source, spec, fetch) for spec in specs]
            outcomes = [future.result() for future in futures]

    records = [record for outcome in outcomes for record in outcome.records]
    elapsed = time.perf_counter() - start
    logger.info("Captured %d records from %d sources in %.3fs", len(records), len(specs), elapsed)
    return AggregateResult(records=records, outcomes=outcomes, elapsed_seconds=elapsed)

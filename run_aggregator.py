from __future__ import annotations
import logging
import sys

from jobfeed.core.config import settings
from jobfeed.crawlers.registry import default_sources
from jobfeed.services.aggregate_service import run_aggregation
from jobfeed.services.json_sink import persist_records

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)


if __name__ == "__main__":
    result = run_aggregation(default_sources(settings))
    ok, msg = persist_records(result.records, settings.output_path)
    if not ok:
        print(f"Could not write {settings.output_path}: {msg}")
    print(f"Captured {len(result.records)} records")
    print(f"Ran in: {result.elapsed_seconds:.3f}s")

from __future__ import annotations
from jobfeed.core.config import Settings, settings as default_settings
from jobfeed.crawlers.adapters.github import GitHubJobsAdapter
from jobfeed.crawlers.adapters.remoteok import RemoteOkAdapter
from jobfeed.crawlers.adapters.stackoverflow import StackOverflowAdapter
from jobfeed.crawlers.base import SourceSpec

ADAPTERS = {
    "github": GitHubJobsAdapter,
    "stackoverflow": StackOverflowAdapter,
    "remoteok": RemoteOkAdapter,
}


def default_sources(cfg: Settings | None = None) -> list[SourceSpec]:
    cfg = cfg or default_settings
    urls = {
        "github": cfg.github_jobs_url,
        "stackoverflow": cfg.stackoverflow_feed_url,
        "remoteok": cfg.remoteok_feed_url,
    }
    return [SourceSpec(url=urls[name], adapter=adapter_cls()) for name, adapter_cls in ADAPTERS.items()]

from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="JOBFEED_", extra="ignore")

    app_name: str = "Job Feed Aggregator"

    github_jobs_url: str = "https://jobs.github.com/positions.json?&location=remote"
    stackoverflow_feed_url: str = "https://stackoverflow.com/jobs/feed?r=true"
    remoteok_feed_url: str = "https://remoteok.io/remote-jobs.rss"

    fetch_timeout: float = 30.0
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
    )

    output_path: str = "jobs.json"


settings = Settings()

"""
Runtime settings for the incident sync job.

Every value has a fixed default; environment variables only exist so the
job can be pointed at another feed or file without editing code.
"""

import logging
import os
from dataclasses import dataclass

log = logging.getLogger(__name__)

DEFAULT_FEED_URL = "https://status.hetzner.com/en.atom"
DEFAULT_DATA_FILE = "data.json"
DEFAULT_COMMITTER_EMAIL = "github-actions[bot]@users.noreply.github.com"
DEFAULT_COMMITTER_NAME = "GitHub Actions"
DEFAULT_REQUEST_TIMEOUT = 30


@dataclass(frozen=True)
class Settings:
    feed_url: str = DEFAULT_FEED_URL
    data_file: str = DEFAULT_DATA_FILE
    committer_email: str = DEFAULT_COMMITTER_EMAIL
    committer_name: str = DEFAULT_COMMITTER_NAME
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT


def _resolve_timeout() -> float:
    raw = os.getenv("INCIDENTSYNC_REQUEST_TIMEOUT")
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        log.warning(
            "Ignoring invalid INCIDENTSYNC_REQUEST_TIMEOUT=%r; using %s",
            raw,
            DEFAULT_REQUEST_TIMEOUT,
        )
        return DEFAULT_REQUEST_TIMEOUT


def load_config() -> Settings:
    """
    Build the Settings for this run.

    This is the single source of truth for config loading.
    """
    return Settings(
        feed_url=os.getenv("INCIDENTSYNC_FEED_URL", DEFAULT_FEED_URL),
        data_file=os.getenv("INCIDENTSYNC_DATA_FILE", DEFAULT_DATA_FILE),
        committer_email=os.getenv("INCIDENTSYNC_COMMITTER_EMAIL", DEFAULT_COMMITTER_EMAIL),
        committer_name=os.getenv("INCIDENTSYNC_COMMITTER_NAME", DEFAULT_COMMITTER_NAME),
        request_timeout=_resolve_timeout(),
    )

"""Fetch the status feed and commit any incidents not seen before."""
import logging
from datetime import datetime
from typing import Callable, List, Optional

from .config import Settings, load_config
from .errors import SyncError
from .log import configure_logging
from .models.incident import Incident
from .services.detection import detect_new_incidents
from .services.fetch import fetch_feed, parse_feed
from .services.publish import CommandRunner, publish_incidents, run_command
from .storage.state import load_incidents

log = logging.getLogger("incidentsync.fetch_sync")

NO_CHANGES_MESSAGE = "No new incidents to commit."

Fetcher = Callable[[str, float], bytes]


def run_sync(
    settings: Settings,
    fetcher: Fetcher = fetch_feed,
    runner: CommandRunner = run_command,
    now: Optional[datetime] = None,
) -> List[Incident]:
    """Run one fetch -> diff -> publish pass and return the new incidents.

    Raises SyncError from whichever stage fails; nothing is written or
    committed unless at least one new incident was found.
    """
    payload = fetcher(settings.feed_url, settings.request_timeout)
    entries = parse_feed(payload)
    incidents = load_incidents(settings.data_file)

    new_incidents, incidents = detect_new_incidents(entries, incidents)
    if not new_incidents:
        log.info("Feed has %d entries, none new", len(entries))
        return []

    log.info("Found %d new incidents", len(new_incidents))
    publish_incidents(new_incidents, incidents, settings, runner=runner, now=now)
    return new_incidents


def main() -> int:
    configure_logging()
    settings = load_config()
    try:
        new_incidents = run_sync(settings)
    except SyncError as exc:
        log.error("%s", exc)
        return 1

    if not new_incidents:
        print(NO_CHANGES_MESSAGE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

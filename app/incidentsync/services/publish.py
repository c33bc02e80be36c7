"""Persist the store and record it in git history."""
import logging
import subprocess
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Sequence

from ..config import Settings
from ..errors import CommandError
from ..models.incident import Incident
from ..storage.state import save_incidents

log = logging.getLogger("incidentsync.publish")

CommandRunner = Callable[[Sequence[str]], None]

ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def run_command(args: Sequence[str]) -> None:
    """Run one external command, streaming its output to ours."""
    log.info("Running %s", " ".join(args))
    try:
        subprocess.run(list(args), check=True)
    except subprocess.CalledProcessError as exc:
        raise CommandError(args, returncode=exc.returncode) from exc
    except OSError as exc:
        raise CommandError(args, reason=str(exc)) from exc


def commit_message(count: int, now: datetime) -> str:
    stamp = now.astimezone(timezone.utc).strftime(ISO_FORMAT)
    return f"Update incidents: {count} new ({stamp})"


def git_commands(settings: Settings, message: str) -> List[List[str]]:
    return [
        ["git", "config", "--global", "user.email", settings.committer_email],
        ["git", "config", "--global", "user.name", settings.committer_name],
        ["git", "add", settings.data_file],
        ["git", "commit", "-m", message],
        ["git", "push"],
    ]


def publish_incidents(
    new_incidents: List[Incident],
    incidents: Dict[str, Incident],
    settings: Settings,
    runner: CommandRunner = run_command,
    now: Optional[datetime] = None,
) -> str:
    """Write the store, then stage, commit and push it.

    Stops at the first failing command without undoing earlier ones, so a
    failed push leaves a local, unpushed commit. Returns the commit message.
    """
    if not new_incidents:
        raise ValueError("publish_incidents needs at least one new incident")

    save_incidents(settings.data_file, incidents)

    message = commit_message(len(new_incidents), now or datetime.now(timezone.utc))
    for args in git_commands(settings, message):
        runner(args)

    log.info("Committed %d new incidents", len(new_incidents))
    return message

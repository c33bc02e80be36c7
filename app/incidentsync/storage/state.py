import json
import logging
import os
from pathlib import Path
from typing import Dict, Union

from ..errors import (
    StoreDecodeError,
    StoreEncodeError,
    StoreOpenError,
    StoreWriteError,
)
from ..models.incident import Incident

log = logging.getLogger("incidentsync.storage")

PathLike = Union[str, os.PathLike]


def load_incidents(path: PathLike) -> Dict[str, Incident]:
    """Load the ID -> Incident mapping stored at path.

    A missing file is the first-run state and yields an empty mapping.
    Records are kept under the key they were stored with.
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except FileNotFoundError:
        log.info("No data file at %s; starting with an empty store", path)
        return {}
    except OSError as exc:
        raise StoreOpenError(f"Error opening data file: {exc}") from exc

    try:
        data = json.loads(raw.decode("utf-8"))
    except ValueError as exc:
        raise StoreDecodeError(f"Error parsing JSON data: {exc}") from exc

    if not isinstance(data, dict):
        raise StoreDecodeError(
            f"Error parsing JSON data: expected an object, got {type(data).__name__}"
        )

    incidents: Dict[str, Incident] = {}
    for key, record in data.items():
        if not isinstance(record, dict):
            raise StoreDecodeError(
                f"Error parsing JSON data: record {key!r} is not an object"
            )
        try:
            incidents[key] = Incident.from_json(record)
        except TypeError as exc:
            raise StoreDecodeError(
                f"Error parsing JSON data: record {key!r}: {exc}"
            ) from exc

    log.info("Loaded %d stored incidents from %s", len(incidents), path)
    return incidents


def _encode(incidents: Dict[str, Incident]) -> str:
    ordered = {key: incidents[key].to_json() for key in sorted(incidents)}
    try:
        return json.dumps(ordered, indent=2, ensure_ascii=False) + "\n"
    except (TypeError, ValueError) as exc:
        raise StoreEncodeError(f"Error saving JSON data: {exc}") from exc


def save_incidents(path: PathLike, incidents: Dict[str, Incident]) -> None:
    """Rewrite the whole store at path.

    The JSON is encoded before any file is touched and written through a
    temp file, so a failure leaves the previous contents in place.
    """
    text = _encode(incidents)
    path = Path(path)
    tmp = path.with_name(path.name + ".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(text)
        tmp.replace(path)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise StoreWriteError(f"Error creating data file: {exc}") from exc
    log.info("Saved %d incidents to %s", len(incidents), path)

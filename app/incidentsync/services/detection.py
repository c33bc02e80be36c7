from typing import Dict, Iterable, List, Tuple

from ..models.incident import Entry, Incident


def detect_new_incidents(
    entries: Iterable[Entry],
    incidents: Dict[str, Incident],
) -> Tuple[List[Incident], Dict[str, Incident]]:
    """Returns: new incidents in feed order, and the updated mapping.

    incidents is mutated in place. An ID already present, including one seen
    earlier in the same feed, is skipped; stored records are never replaced.
    """
    new_incidents: List[Incident] = []
    for entry in entries:
        if entry.id in incidents:
            continue
        incident = Incident.from_entry(entry)
        incidents[entry.id] = incident
        new_incidents.append(incident)
    return new_incidents, incidents

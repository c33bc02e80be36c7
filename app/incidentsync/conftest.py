from typing import Callable, Dict, List

import pytest

ATOM_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<feed xmlns="http://www.w3.org/2005/Atom" xml:lang="en">\n'
    "  <id>https://status.example/en.atom</id>\n"
    "  <title>Status</title>\n"
)

ENTRY_TEMPLATE = """  <entry>
    <id>{id}</id>
    <updated>{updated}</updated>
    <title>{title}</title>
    <link rel="alternate" type="text/html" href="{link}"/>
    <content type="xhtml"><div xmlns="http://www.w3.org/1999/xhtml">{content}</div></content>
  </entry>
"""


def _entry(id: str, **overrides) -> Dict[str, str]:
    data = {
        "id": id,
        "updated": "2024-01-01T00:00:00Z",
        "title": f"Incident {id}",
        "content": f"Details for {id}",
        "link": f"https://status.example/{id}",
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_entry() -> Callable[..., Dict[str, str]]:
    return _entry


@pytest.fixture
def make_feed() -> Callable[[List[Dict[str, str]]], bytes]:
    """Render entry dicts as an Atom document."""
    def build(entries: List[Dict[str, str]]) -> bytes:
        body = "".join(ENTRY_TEMPLATE.format(**e) for e in entries)
        return (ATOM_HEADER + body + "</feed>\n").encode("utf-8")
    return build

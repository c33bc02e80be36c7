"""Fetch and parse the status page Atom feed."""
import logging
from typing import List

import requests
from bs4 import BeautifulSoup
from lxml import etree

from ..config import DEFAULT_REQUEST_TIMEOUT
from ..errors import FetchError, ParseError, ReadError
from ..models.incident import Entry

log = logging.getLogger("incidentsync.fetch")


def fetch_feed(url: str, timeout: float = DEFAULT_REQUEST_TIMEOUT) -> bytes:
    log.info("Fetching %s", url)
    try:
        resp = requests.get(url, timeout=timeout, stream=True)
    except requests.RequestException as exc:
        raise FetchError(f"Error fetching the feed: {exc}") from exc

    with resp:
        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            raise FetchError(f"Error fetching the feed: {exc}") from exc
        try:
            body = resp.content
        except (requests.RequestException, OSError) as exc:
            raise ReadError(f"Error reading response body: {exc}") from exc

    log.info("Fetched %d bytes from %s", len(body), url)
    return body


def _check_well_formed(payload: bytes) -> None:
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        etree.fromstring(payload, parser)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise ParseError(f"Error parsing the feed: {exc}") from exc


def _text(node) -> str:
    if node is None:
        return ""
    return "".join(node.find_all(string=True, recursive=False))


def _content(entry) -> str:
    # Only character data sitting directly in the <div>; nested markup is skipped.
    content = entry.find("content", recursive=False)
    if content is None:
        return ""
    div = content.find("div", recursive=False)
    if div is None:
        return ""
    return "".join(div.find_all(string=True, recursive=False))


def _link(entry) -> str:
    # Later <link> elements override earlier ones.
    href = ""
    for link in entry.find_all("link", recursive=False):
        href = link.get("href", href)
    return href


def parse_feed(payload: bytes) -> List[Entry]:
    """Turn a raw Atom document into entries, in feed order.

    Malformed XML or a root element other than <feed> raises ParseError.
    Missing child elements become empty strings.
    """
    if not payload:
        raise ParseError("Error parsing the feed: empty document")
    _check_well_formed(payload)

    soup = BeautifulSoup(payload, "xml")
    feed = soup.find("feed", recursive=False)
    if feed is None:
        raise ParseError("Error parsing the feed: root element is not <feed>")

    entries: List[Entry] = []
    for node in feed.find_all("entry", recursive=False):
        entries.append(
            Entry(
                id=_text(node.find("id", recursive=False)),
                updated=_text(node.find("updated", recursive=False)),
                title=_text(node.find("title", recursive=False)),
                content=_content(node),
                link=_link(node),
            )
        )

    log.info("Parsed %d feed entries", len(entries))
    return entries

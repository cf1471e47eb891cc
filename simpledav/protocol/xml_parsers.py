"""
Pure functions for parsing WebDAV multistatus responses into
ResourceEntry objects.

Parsing is forgiving: a body that is not well-formed XML,
or a multistatus without any usable response element, yields an empty
list rather than an exception.  Response elements that cannot be turned
into an entry are skipped.
"""

import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from urllib.parse import unquote

from lxml import etree
from lxml.etree import _Element

from simpledav.elements import dav
from simpledav.lib import error
from simpledav.lib.url import basename, href_to_path, normalize_path

from .types import ResourceEntry

log = logging.getLogger(__name__)


def parse_multistatus_entries(
    body: bytes | str | None,
    huge_tree: bool = False,
) -> list[ResourceEntry]:
    """
    Parse a 207 Multi-Status response body.

    Args:
        body: Raw XML response
        huge_tree: Allow parsing very large XML documents

    Returns:
        Entries in document order.  Empty if the body can't be parsed.
    """
    if not body:
        return []
    if isinstance(body, str):
        body = body.encode("utf-8")

    parser = etree.XMLParser(huge_tree=huge_tree, resolve_entities=False, no_network=True)
    try:
        tree = etree.fromstring(body, parser)
    except (etree.XMLSyntaxError, ValueError):
        log.debug("Unparsable multistatus body, treating it as empty", exc_info=True)
        return []
    if tree is None:
        return []

    entries: list[ResourceEntry] = []
    for elem in _strip_to_multistatus(tree).iterchildren(dav.Response.tag):
        entry = build_entry(elem)
        if entry is not None:
            entries.append(entry)
    return entries


def build_entry(response: _Element) -> ResourceEntry | None:
    """
    Turn one DAV:response element into a ResourceEntry.

    Returns None if the element has no href, no propstat, or an href
    without a usable last path segment (i.e. "/").
    """
    href = _href(response)
    if not href:
        error.weirdness("response element without href", response)
        return None

    prop = select_prop(response.findall(dav.PropStat.tag))
    if prop is None:
        log.debug("Skipping %s, no usable propstat", href)
        return None

    name = basename(href)
    if not name:
        return None

    is_dir = False
    resource_type = prop.find(dav.ResourceType.tag)
    if resource_type is not None:
        is_dir = resource_type.find(dav.Collection.tag) is not None
    if not is_dir:
        is_dir = href.endswith("/")

    return ResourceEntry(
        path=href,
        name=name,
        is_dir=is_dir,
        size=_content_length(prop.find(dav.GetContentLength.tag)),
        mtime=_last_modified(prop.find(dav.GetLastModified.tag)),
    )


def select_prop(propstats: list[_Element]) -> _Element | None:
    """
    Pick the DAV:prop element to read properties from.

    The first propstat with a 200 status (or without any status at all)
    wins.  If none of them qualifies, the prop of the first propstat is
    used regardless of its status.
    """
    if not propstats:
        return None

    for propstat in propstats:
        status = propstat.findtext(dav.Status.tag) or ""
        if not status or " 200" in status:
            return propstat.find(dav.Prop.tag)

    return propstats[0].find(dav.Prop.tag)


def filter_self_entry(
    entries: list[ResourceEntry], requested_path: str
) -> list[ResourceEntry]:
    """
    Drop the entry describing the listed directory itself.

    requested_path is the absolute server path that was asked for (base
    path included); it may be percent-encoded and have trailing slashes.
    """
    normalized = normalize_path(requested_path)
    if not normalized:
        return entries
    return [entry for entry in entries if entry.path.rstrip("/") != normalized]


# Helper functions


def _strip_to_multistatus(tree: _Element) -> _Element:
    """
    The general format is:
        <multistatus>
            <response>...</response>
        </multistatus>

    but some servers wrap it into an <xml> element.
    """
    if tree.tag == "xml" and len(tree) > 0 and tree[0].tag == dav.MultiStatus.tag:
        error.weirdness("multistatus wrapped in an <xml> element")
        return tree[0]
    return tree


def _href(response: _Element) -> str:
    text = (response.findtext(dav.Href.tag) or "").strip()
    # Absolute URLs are reduced to their path
    return unquote(href_to_path(text))


def _content_length(elem: _Element | None) -> int:
    if elem is None or not elem.text:
        return 0
    try:
        return max(int(elem.text.strip()), 0)
    except ValueError:
        return 0


def _last_modified(elem: _Element | None) -> int:
    if elem is None or not elem.text:
        return 0
    text = elem.text.strip()
    try:
        dt = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        ## Not an RFC 1123 date.  A few servers deliver ISO 8601.
        try:
            dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return 0
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp())

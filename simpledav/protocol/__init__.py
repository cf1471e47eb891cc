"""
Sans-I/O WebDAV protocol pieces.

This package builds request bodies and parses response bodies as pure
data transformations, with no I/O:

- types: Core data structures (DAVMethod, DAVOutcome, ResourceEntry)
- xml_builders: Build the PROPFIND request body
- xml_parsers: Parse multistatus responses into ResourceEntry objects

Example usage:

    from simpledav.protocol import build_propfind_body, parse_multistatus_entries

    body = build_propfind_body()
    # ... send it with Depth: 1 using your preferred I/O ...
    entries = parse_multistatus_entries(response_body)
"""

from .types import (
    DAVMethod,
    DAVOutcome,
    ResourceEntry,
)
from .xml_builders import (
    DEFAULT_PROPS,
    build_propfind_body,
)
from .xml_parsers import (
    build_entry,
    filter_self_entry,
    parse_multistatus_entries,
    select_prop,
)

__all__ = [
    # Types
    "DAVMethod",
    "DAVOutcome",
    "ResourceEntry",
    # XML Builders
    "DEFAULT_PROPS",
    "build_propfind_body",
    # XML Parsers
    "build_entry",
    "filter_self_entry",
    "parse_multistatus_entries",
    "select_prop",
]

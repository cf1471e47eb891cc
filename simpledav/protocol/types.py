"""
Core protocol types for the WebDAV client.

These dataclasses represent requests, responses and directory entries at
the protocol level, independent of the I/O implementation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DAVMethod(Enum):
    """WebDAV HTTP methods used by the client."""

    GET = "GET"
    PUT = "PUT"
    DELETE = "DELETE"
    PROPFIND = "PROPFIND"
    MKCOL = "MKCOL"


@dataclass(frozen=True)
class ResourceEntry:
    """
    Metadata of a single WebDAV resource, built from one DAV:response
    element of a multistatus document.

    Attributes:
        path: Server-relative href, URL-decoded, as delivered by the server
        name: Last path segment, decoded, without separators
        is_dir: True for collections
        size: Content length in bytes, 0 for collections or when unknown
        mtime: Last modification as seconds since the epoch, 0 when unknown
    """

    path: str
    name: str
    is_dir: bool = False
    size: int = 0
    mtime: int = 0

    @property
    def kind(self) -> str:
        """Either "directory" or "file", always in line with is_dir."""
        return "directory" if self.is_dir else "file"

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "name": self.name,
            "is_dir": self.is_dir,
            "size": self.size,
            "mtime": self.mtime,
            "type": self.kind,
        }


@dataclass(frozen=True)
class DAVOutcome:
    """
    Status and body of one completed request.

    Attributes:
        status: HTTP status code
        reason: Reason phrase given by the server
        headers: HTTP response headers
        body: Response body, None if the body was written to a sink
    """

    status: int
    reason: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None

    @property
    def ok(self) -> bool:
        """True if status indicates success (2xx)."""
        return 200 <= self.status < 300

    @property
    def is_multistatus(self) -> bool:
        """True if this is a 207 Multi-Status response."""
        return self.status == 207

"""
Authentication utilities for the WebDAV client.

The client does not know up front whether the server wants Basic or
Digest authentication.  Unless an auth_type is configured, requests are
first sent without credentials; the WWW-Authenticate header of the 401
answer tells which scheme to use for the retry.
"""

from __future__ import annotations

from requests.auth import AuthBase, HTTPBasicAuth, HTTPDigestAuth

SUPPORTED_AUTH_TYPES = ("basic", "digest")


def extract_auth_types(header: str) -> set[str]:
    """
    Extract authentication types from WWW-Authenticate header.

    Example:
        >>> sorted(extract_auth_types('Basic realm="test", Digest realm="test"'))
        ['basic', 'digest']

    Reference:
        https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/WWW-Authenticate#syntax
    """
    return {h.split()[0] for h in header.lower().split(",") if h.strip()}


def select_auth_type(auth_types: set[str] | list[str]) -> str | None:
    """
    Pick Digest if the server offers it, else Basic, else nothing.
    """
    if "digest" in auth_types:
        return "digest"
    if "basic" in auth_types:
        return "basic"
    return None


def build_auth(auth_type: str | None, username: str, password: str | None) -> AuthBase | None:
    """Returns a requests auth object for the given scheme"""
    if auth_type == "digest":
        return HTTPDigestAuth(username, password or "")
    if auth_type == "basic":
        return HTTPBasicAuth(username, password or "")
    return None

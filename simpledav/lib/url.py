#!/usr/bin/env python
"""
Helpers for turning the paths given by library users into URLs the
server will accept, and for comparing paths delivered by the server.

Paths given to the DAVClient methods are plain (unquoted) paths
relative to the base URL, i.e. "docs/my report.pdf" or
"/docs/my report.pdf" both refer to
"https://dav.example.com/remote.php/webdav/docs/my%20report.pdf" when
the client was instantiated with the base URL
"https://dav.example.com/remote.php/webdav/".
"""
from urllib.parse import ParseResult
from urllib.parse import quote
from urllib.parse import unquote
from urllib.parse import urlparse
from urllib.parse import urlunparse


def normalize_base_url(url: str) -> str:
    """The base URL is kept without trailing slashes"""
    return url.rstrip("/")


def quote_path(path: str) -> str:
    """
    Percent-encode everything except the unreserved characters, then
    give the path separators back.  "/a/b c/" becomes "/a/b%20c/".
    """
    return quote(path, safe="").replace("%2F", "/")


def build_url(base_url: str, path: str) -> str:
    """
    Join the (already normalized) base URL with a path.  The path always
    gets exactly one leading slash, trailing slashes are kept as given.
    """
    path = "/" + path.lstrip("/")
    return base_url + quote_path(path)


def base_path(base_url: str) -> str:
    """The path component of the base URL, i.e. "/remote.php/webdav" """
    return urlparse(base_url).path


def normalize_path(path: str) -> str:
    """Unquote a path and strip trailing separators for comparisons"""
    return unquote(path).rstrip("/")


def href_to_path(href: str) -> str:
    """
    Some servers deliver fully qualified URLs rather than paths in the
    href elements.  Returns the path part, leaves paths untouched.
    """
    if "://" in href:
        return urlparse(href).path
    return href


def basename(path: str) -> str:
    """The last path segment, ignoring trailing slashes"""
    return path.rstrip("/").rsplit("/", 1)[-1]


def redact_url(url: str) -> str:
    """Strip user credentials from an URL before it ends up in the log"""
    parsed = urlparse(url)
    if parsed.username is None and parsed.password is None:
        return url
    netloc = parsed.hostname or ""
    if parsed.port:
        netloc = "%s:%s" % (netloc, parsed.port)
    return urlunparse(
        ParseResult(
            parsed.scheme,
            netloc,
            parsed.path,
            parsed.params,
            parsed.query,
            parsed.fragment,
        )
    )

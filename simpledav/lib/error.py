#!/usr/bin/env python
import logging
import os
from typing import Optional

from simpledav import __version__

## Environmental variables prepended with "SIMPLEDAV_" starting with
## DEBUG/COMMDUMP are for debug purposes only
debug_dump_communication = os.environ.get("SIMPLEDAV_COMMDUMP", False)

## one of DEBUG_PDB, DEBUG, DEVELOPMENT, PRODUCTION
debugmode = os.environ.get("SIMPLEDAV_DEBUGMODE")
if not debugmode:
    if "dev" in __version__:
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("simpledav")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


def weirdness(*reasons) -> None:
    """Log a deviation from what a well-behaved server would deliver"""
    from simpledav.lib.debug import xmlstring

    reason = " : ".join([xmlstring(x) for x in reasons])
    log.warning(f"Deviation from expectations found: {reason}")
    if debugmode == "DEBUG_PDB":
        log.error(f"Dropping into debugger due to {reason}")
        import pdb

        pdb.set_trace()


class DAVError(Exception):
    url: Optional[str] = None
    reason: str = "no reason"

    def __init__(self, url: Optional[str] = None, reason: Optional[str] = None) -> None:
        if url:
            self.url = url
        if reason:
            self.reason = reason

    def __str__(self) -> str:
        return "%s at '%s', reason %s" % (
            self.__class__.__name__,
            self.url,
            self.reason,
        )


class AuthorizationError(DAVError):
    """
    The configured auth_type is not one of the supported
    authentication schemes.
    """

    pass


class TransportError(DAVError):
    """
    The HTTP request could not be completed at all - connection refused,
    TLS handshake failure, timeout, broken connection and the like.
    The original exception from the requests library is chained.
    """

    pass


class ProtocolStatusError(DAVError):
    """
    The server answered, but with a status code the operation does not
    accept.  The status property holds the code received.
    """

    status: Optional[int] = None

    def __init__(
        self,
        url: Optional[str] = None,
        reason: Optional[str] = None,
        status: Optional[int] = None,
    ) -> None:
        super().__init__(url=url, reason=reason)
        self.status = status


class PropfindError(ProtocolStatusError):
    pass


class LocalIOError(DAVError):
    """A local file could not be opened for reading or writing"""

    pass

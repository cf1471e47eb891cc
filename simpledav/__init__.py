#!/usr/bin/env python
import logging

__version__ = "2.0.0"

from .davclient import DAVClient
from .davclient import get_davclient
from .protocol.types import ResourceEntry
from .streaming import StreamingResponse

# Silence notification of no default logging handler
log = logging.getLogger("simpledav")


class NullHandler(logging.Handler):
    def emit(self, record) -> None:
        pass


log.addHandler(NullHandler())

__all__ = [
    "__version__",
    "DAVClient",
    "ResourceEntry",
    "StreamingResponse",
    "get_davclient",
]

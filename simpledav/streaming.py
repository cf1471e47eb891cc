"""
Relaying a remote file to a downstream consumer.

A :class:`StreamingResponse` is created by
:meth:`simpledav.davclient.DAVClient.download_to_response`.  Nothing
happens on construction; the GET request towards the WebDAV server is
sent when the host drains the response, either through a
:class:`ResponseSink` (:meth:`StreamingResponse.send`) or by serving it
as a WSGI application.

Status and headers are settled before the first byte of the body is
handed over, and never change after that.  Only Content-Range,
Content-Length and Content-Type are taken over from the server, and the
status turns from 200 into 206 when the server delivers partial
content, so Range requests from e.g. a video player are honored.

The body is relayed chunk by chunk as it arrives, it's never held in
memory as a whole.  If the transfer breaks down, the failure is logged
and the stream just ends - the headers may already be on the wire, so
there is nobody left to raise an exception to.  Consumers will notice
the body being shorter than the announced Content-Length.
"""

import logging
from http import HTTPStatus
from typing import TYPE_CHECKING
from typing import Callable
from typing import Iterator
from typing import Optional
from typing import Protocol
from urllib.parse import quote

import requests
from requests.structures import CaseInsensitiveDict

from simpledav.lib import error
from simpledav.lib.url import redact_url

if TYPE_CHECKING:
    from simpledav.davclient import DAVClient

log = logging.getLogger(__name__)

## 128 KiB - fewer, larger writes towards the consumer
CHUNK_SIZE = 128 * 1024

## Upstream headers passed on to the consumer, verbatim
FORWARDED_HEADERS = ("Content-Range", "Content-Length", "Content-Type")


class ResponseSink(Protocol):
    """The outbound side, as provided by the host framework"""

    def set_status(self, status: int) -> None: ...

    def set_header(self, name: str, value: str) -> None: ...

    def commit_headers(self) -> None: ...

    def write_chunk(self, data: bytes) -> None: ...


def content_disposition(name: str) -> str:
    """
    attachment; filename="..." - with an RFC 6266 filename* parameter
    added for names that aren't plain ASCII
    """
    quoted = name.replace("\\", "\\\\").replace('"', '\\"')
    try:
        quoted.encode("ascii")
    except UnicodeEncodeError:
        fallback = quoted.encode("ascii", "replace").decode("ascii")
        return "attachment; filename=\"%s\"; filename*=UTF-8''%s" % (
            fallback,
            quote(name, safe=""),
        )
    return 'attachment; filename="%s"' % quoted


def status_line(status: int) -> str:
    """WSGI status line, i.e. "206 Partial Content" """
    try:
        phrase = HTTPStatus(status).phrase
    except ValueError:
        phrase = "Unknown"
    return "%d %s" % (status, phrase)


class StreamingResponse:
    """
    A lazily evaluated response relaying a remote file.

    Attributes:
        url: full URL of the remote file
        name: file name offered to the consumer
        range_header: Range header to forward, or None
        status: status code to be sent to the consumer
        headers: headers to be sent to the consumer
        headers_sent: becomes True when status and headers are committed
    """

    def __init__(
        self,
        client: "DAVClient",
        url: str,
        name: str,
        range_header: Optional[str] = None,
    ) -> None:
        self.client = client
        self.url = url
        self.name = name
        self.range_header = range_header
        self.status = 200
        self.headers_sent = False

        self.headers = CaseInsensitiveDict()
        self.headers["Content-Type"] = "application/octet-stream"
        self.headers["Content-Disposition"] = content_disposition(name)
        self.headers["X-Accel-Buffering"] = "no"
        self.headers["Accept-Ranges"] = "bytes"

    def set_status(self, status: int) -> None:
        if self.headers_sent:
            raise RuntimeError("status can't be changed after the headers are sent")
        self.status = status

    def set_header(self, name: str, value: str) -> None:
        if self.headers_sent:
            raise RuntimeError("headers can't be changed after they are sent")
        self.headers[name] = value

    def send(self, sink: ResponseSink) -> None:
        """Drains the response into the sink"""

        def commit() -> None:
            sink.set_status(self.status)
            for name, value in self.headers.items():
                sink.set_header(name, value)
            sink.commit_headers()

        for chunk in self.iter_chunks(commit):
            sink.write_chunk(chunk)

    def __call__(self, environ, start_response):
        """WSGI application; start_response is called right before the first chunk"""

        def commit() -> None:
            start_response(status_line(self.status), list(self.headers.items()))

        return self.iter_chunks(commit)

    def iter_chunks(self, commit: Callable[[], None]) -> Iterator[bytes]:
        """
        Generator doing the actual work.  commit is called exactly once,
        after status and headers are settled and before the first chunk
        is yielded (or at the end, for an empty body).
        """
        upstream = None
        try:
            upstream = self.client.open_stream(self.url, self._upstream_headers())
            self._take_over(upstream)
            for chunk in upstream.iter_content(chunk_size=CHUNK_SIZE):
                if not chunk:
                    continue
                if not self.headers_sent:
                    self._commit(commit)
                yield chunk
        except (error.DAVError, requests.exceptions.RequestException) as e:
            log.error("WebDAV download of %s failed: %s" % (redact_url(self.url), e))
            if not self.headers_sent:
                self.status = 502
                self.headers.pop("Content-Length", None)
                self.headers.pop("Content-Range", None)
        finally:
            if upstream is not None:
                upstream.close()

        if not self.headers_sent:
            self._commit(commit)

    def _upstream_headers(self) -> dict:
        ## identity encoding, so the bytes (and Content-Length) are relayed unchanged
        headers = {"Accept-Encoding": "identity"}
        if self.range_header is not None:
            headers["Range"] = self.range_header
        return headers

    def _take_over(self, upstream: requests.Response) -> None:
        if upstream.status_code == 206:
            self.set_status(206)
        for name in FORWARDED_HEADERS:
            value = upstream.headers.get(name)
            if value is not None:
                self.set_header(name, value)
        if upstream.status_code >= 400:
            log.warning(
                "server answered %i %s for %s"
                % (upstream.status_code, upstream.reason, redact_url(self.url))
            )

    def _commit(self, commit: Callable[[], None]) -> None:
        commit()
        self.headers_sent = True

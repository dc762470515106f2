"""urllib handler normalizing ``http`` and ``https`` requests."""

import copy
import urllib.request
from typing import Any

from .normalize import normalize_url


class LoopbackHandler(urllib.request.BaseHandler):
    """Pre-processor that aims alias requests at the numeric address.

    Runs before ``AbstractHTTPHandler`` so the Host header is derived from
    the rewritten URL. Redirect hops re-enter the opener and are processed
    again.
    """

    handler_order = 400

    def http_request(self, request: urllib.request.Request) -> urllib.request.Request:
        url = normalize_url(request.full_url)
        if url == request.full_url:
            return request

        clone = copy.copy(request)
        clone.headers = dict(request.headers)
        clone.unredirected_hdrs = dict(request.unredirected_hdrs)
        clone.full_url = url
        return clone

    https_request = http_request


def build_opener(*handlers: Any) -> urllib.request.OpenerDirector:
    """``urllib.request.build_opener`` with :class:`LoopbackHandler` added."""
    return urllib.request.build_opener(LoopbackHandler(), *handlers)


def urlopen(
    url: str | urllib.request.Request,
    data: bytes | None = None,
    timeout: float | None = None,
    *,
    context: Any = None,
) -> Any:
    """Open *url* like ``urllib.request.urlopen``, normalizing the target."""
    handlers = [urllib.request.HTTPSHandler(context=context)] if context is not None else []
    opener = build_opener(*handlers)
    if timeout is None:
        return opener.open(url, data)
    return opener.open(url, data, timeout)

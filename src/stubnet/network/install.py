"""Process-wide wrappers for httpx and ``http.client``."""

import functools
import http.client
import logging
from collections.abc import Callable
from typing import Any

import httpx

from stubnet.patching import patch_attribute

from .normalize import normalize_host, normalize_request

logger = logging.getLogger(__name__)


def wrap_handle_request(original: Callable[..., httpx.Response]) -> Callable[..., httpx.Response]:
    """Normalize requests reaching a sync transport.

    Every client, module-level helper and redirect hop sends through the
    transport. The client keeps its own request, so cookies and redirect
    origin checks still see the alias.
    """

    @functools.wraps(original)
    def handle_request(self: Any, request: httpx.Request) -> httpx.Response:
        return original(self, normalize_request(request))

    return handle_request


def wrap_handle_async_request(original: Callable[..., Any]) -> Callable[..., Any]:
    """Async counterpart of :func:`wrap_handle_request`."""

    @functools.wraps(original)
    async def handle_async_request(self: Any, request: httpx.Request) -> httpx.Response:
        return await original(self, normalize_request(request))

    return handle_async_request


def wrap_connection_init(original: Callable[..., None]) -> Callable[..., None]:
    """Normalize the ``host`` argument of ``HTTPConnection.__init__``.

    ``HTTPSConnection`` and ``urllib.request`` both go through this
    constructor, so one wrapper covers both schemes.
    """

    @functools.wraps(original)
    def __init__(self: Any, *args: Any, **kwargs: Any) -> None:
        if args:
            args = (normalize_host(args[0]), *args[1:])
        elif "host" in kwargs:
            kwargs["host"] = normalize_host(kwargs["host"])
        original(self, *args, **kwargs)

    return __init__


def _normalize_header_value(value: Any) -> Any:
    if isinstance(value, bytes):
        return normalize_host(value.decode("latin-1")).encode("latin-1")
    if isinstance(value, str):
        return normalize_host(value)
    return value


def wrap_putheader(original: Callable[..., None]) -> Callable[..., None]:
    """Normalize ``Host`` headers supplied by callers such as ``urllib``."""

    @functools.wraps(original)
    def putheader(self: Any, header: Any, *values: Any) -> None:
        name = header.decode("latin-1") if isinstance(header, bytes) else str(header)
        if name.lower() == "host":
            values = tuple(_normalize_header_value(value) for value in values)
        original(self, header, *values)

    return putheader


def install_network(httpx_module: Any = httpx, http_client_module: Any = http.client) -> list[str]:
    """Install every network wrapper once.

    Returns the dotted names wrapped by this call; an empty list means
    everything was already in place.
    """
    targets = [
        (httpx_module.HTTPTransport, "handle_request", wrap_handle_request),
        (httpx_module.AsyncHTTPTransport, "handle_async_request", wrap_handle_async_request),
        (http_client_module.HTTPConnection, "__init__", wrap_connection_init),
        (http_client_module.HTTPConnection, "putheader", wrap_putheader),
    ]

    installed = []
    for owner, name, make_wrapper in targets:
        if patch_attribute(owner, name, make_wrapper):
            installed.append(f"{owner.__name__}.{name}")

    if installed:
        logger.info("Installed loopback normalization on %s", ", ".join(installed))
    return installed

"""httpx transports and client factories that normalize the loopback alias."""

from typing import Any

import httpx

from .normalize import normalize_request, normalize_url

TRANSPORT_OPTIONS = ("verify", "trust_env", "http1", "http2", "limits")
CLIENT_OPTIONS = (
    "auth",
    "base_url",
    "cookies",
    "follow_redirects",
    "proxy",
    "timeout",
    "trust_env",
    "verify",
)


class LoopbackTransport(httpx.BaseTransport):
    """Sync transport that rewrites alias requests before delegating.

    Redirect hops are sent through the client's transport as well, so
    following redirects to ``localhost`` is covered.
    """

    def __init__(self, inner: httpx.BaseTransport | None = None):
        self.inner = inner if inner is not None else httpx.HTTPTransport()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        return self.inner.handle_request(normalize_request(request))

    def close(self) -> None:
        self.inner.close()


class AsyncLoopbackTransport(httpx.AsyncBaseTransport):
    """Async counterpart of :class:`LoopbackTransport`."""

    def __init__(self, inner: httpx.AsyncBaseTransport | None = None):
        self.inner = inner if inner is not None else httpx.AsyncHTTPTransport()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return await self.inner.handle_async_request(normalize_request(request))

    async def aclose(self) -> None:
        await self.inner.aclose()


def _split_transport_options(kwargs: dict[str, Any]) -> dict[str, Any]:
    if "base_url" in kwargs:
        kwargs["base_url"] = normalize_url(kwargs["base_url"])
    return {key: kwargs[key] for key in TRANSPORT_OPTIONS if key in kwargs}


def create_client(**kwargs: Any) -> httpx.Client:
    """Build an ``httpx.Client`` whose requests never target the alias.

    Accepts the same keyword arguments as ``httpx.Client``. A supplied
    ``transport`` becomes the inner transport.
    """
    options = _split_transport_options(kwargs)
    inner = kwargs.pop("transport", None) or httpx.HTTPTransport(**options)
    return httpx.Client(transport=LoopbackTransport(inner), **kwargs)


def create_async_client(**kwargs: Any) -> httpx.AsyncClient:
    """Async counterpart of :func:`create_client`."""
    options = _split_transport_options(kwargs)
    inner = kwargs.pop("transport", None) or httpx.AsyncHTTPTransport(**options)
    return httpx.AsyncClient(transport=AsyncLoopbackTransport(inner), **kwargs)


def request(method: str, url: httpx.URL | str, **kwargs: Any) -> httpx.Response:
    """Send one request like ``httpx.request``, normalizing the target."""
    client_kwargs = {key: kwargs.pop(key) for key in CLIENT_OPTIONS if key in kwargs}
    with create_client(**client_kwargs) as client:
        return client.request(method, normalize_url(url), **kwargs)


def get(url: httpx.URL | str, **kwargs: Any) -> httpx.Response:
    """Send a GET request."""
    return request("GET", url, **kwargs)


def post(url: httpx.URL | str, **kwargs: Any) -> httpx.Response:
    """Send a POST request."""
    return request("POST", url, **kwargs)

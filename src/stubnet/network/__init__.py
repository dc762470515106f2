"""Loopback alias normalization for outgoing requests."""

from .install import install_network
from .normalize import (
    is_loopback_alias,
    normalize_host,
    normalize_request,
    normalize_target,
    normalize_url,
)
from .transport import (
    AsyncLoopbackTransport,
    LoopbackTransport,
    create_async_client,
    create_client,
    get,
    post,
    request,
)
from .urllib_handler import LoopbackHandler, build_opener, urlopen

__all__ = [
    "AsyncLoopbackTransport",
    "LoopbackHandler",
    "LoopbackTransport",
    "build_opener",
    "create_async_client",
    "create_client",
    "get",
    "install_network",
    "is_loopback_alias",
    "normalize_host",
    "normalize_request",
    "normalize_target",
    "normalize_url",
    "post",
    "request",
    "urlopen",
]

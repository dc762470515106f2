"""Loopback alias normalization for request targets.

Every function here is best-effort: values that are not loopback-alias
targets, or that cannot be parsed, come back unchanged and nothing raises.
"""

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

import httpx

from stubnet.constants import LOOPBACK_ADDRESS, LOOPBACK_ALIAS

logger = logging.getLogger(__name__)

URL_KEYS = ("url", "base_url")
HOST_KEYS = ("host", "hostname")


def is_loopback_alias(host: Any) -> bool:
    """Return True if *host* names the loopback alias (case-insensitive)."""
    return isinstance(host, str) and host.lower() == LOOPBACK_ALIAS


def normalize_host(value: Any) -> Any:
    """Rewrite ``localhost`` or ``localhost:<port>`` to the numeric address."""
    if not isinstance(value, str):
        return value
    host, sep, port = value.partition(":")
    if not is_loopback_alias(host):
        return value
    return f"{LOOPBACK_ADDRESS}{sep}{port}"


def normalize_url(value: Any) -> Any:
    """Rewrite the hostname of an absolute URL pointing at the alias.

    Only the host portion of the netloc changes; scheme, userinfo, port,
    path, query and fragment are kept byte-for-byte.
    """
    if isinstance(value, httpx.URL):
        return _normalize_httpx_url(value)
    if not isinstance(value, str):
        return value

    try:
        parts = urlsplit(value)
        hostname = parts.hostname
        _ = parts.port  # malformed ports raise ValueError
    except ValueError as exc:
        logger.debug("Leaving unparseable URL %r unchanged: %s", value, exc)
        return value

    if not parts.netloc or not is_loopback_alias(hostname):
        return value

    userinfo, at, hostport = parts.netloc.rpartition("@")
    netloc = f"{userinfo}{at}{normalize_host(hostport)}"
    return value.replace(f"//{parts.netloc}", f"//{netloc}", 1)


def _normalize_httpx_url(url: httpx.URL) -> httpx.URL:
    if not is_loopback_alias(url.host):
        return url
    try:
        return url.copy_with(host=LOOPBACK_ADDRESS)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        logger.debug("Leaving URL %s unchanged: %s", url, exc)
        return url


def normalize_target(target: Any) -> Any:
    """Normalize any supported request target shape.

    Accepts a bare address (``str`` or ``httpx.URL``), a mapping with
    ``host``/``hostname`` fields, or a mapping composing ``base_url`` with a
    relative ``url``. Mappings are shallow-copied; the caller's object is
    never modified.
    """
    if isinstance(target, (str, httpx.URL)):
        return normalize_url(target)
    if not isinstance(target, Mapping):
        return target

    config = dict(target)
    for key in URL_KEYS:
        if key in config:
            config[key] = normalize_url(config[key])
    for key in HOST_KEYS:
        if key in config:
            config[key] = normalize_host(config[key])
    return config


def normalize_request(request: httpx.Request) -> httpx.Request:
    """Return a copy of *request* aimed at the numeric address, if needed.

    The original request object is returned as-is when its host is not the
    alias.
    """
    url = _normalize_httpx_url(request.url)
    if url is request.url:
        return request

    headers = httpx.Headers(request.headers)
    if "host" in headers:
        headers["Host"] = normalize_host(headers["Host"])
    return httpx.Request(
        request.method,
        url,
        headers=headers,
        stream=request.stream,
        extensions=request.extensions,
    )

"""respx allowlist broadening for the loopback address."""

from .patcher import (
    ALLOWLIST_ROUTE_NAME,
    LOOPBACK_HOST_PATTERN,
    allow_connect,
    broaden_target,
    install_allowlist,
    wrap_pass_through,
    wrap_route,
)

__all__ = [
    "ALLOWLIST_ROUTE_NAME",
    "LOOPBACK_HOST_PATTERN",
    "allow_connect",
    "broaden_target",
    "install_allowlist",
    "wrap_pass_through",
    "wrap_route",
]

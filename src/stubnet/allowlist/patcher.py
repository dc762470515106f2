"""Loopback pass-through registration for respx routers."""

import functools
import logging
import re
from collections.abc import Callable
from typing import Any

import respx
from respx.patterns import M

from stubnet.constants import LOOPBACK_ADDRESS
from stubnet.patching import patch_attribute

logger = logging.getLogger(__name__)

LOOPBACK_HOST_PATTERN = re.compile(r"^(?:127\.0\.0\.1|localhost)(?::\d+)?$", re.IGNORECASE)
ALLOWLIST_ROUTE_NAME = "stubnet-loopback"

NUMERIC_LOOPBACK = M(host=LOOPBACK_ADDRESS)
BROADENED_LOOPBACK = M(host__regex=LOOPBACK_HOST_PATTERN)


def broaden_target(value: Any) -> Any:
    """Swap the bare numeric loopback address for the combined pattern."""
    if value == LOOPBACK_ADDRESS:
        return LOOPBACK_HOST_PATTERN
    return value


def allow_connect(router: Any, target: Any, name: str | None = None) -> Any:
    """Register *target* as a pass-through host on *router*.

    *target* may be a literal host or a compiled pattern. The numeric
    loopback address is broadened so the alias passes through as well.
    """
    target = broaden_target(target)
    if isinstance(target, re.Pattern):
        route = router.route(host__regex=target, name=name)
    else:
        route = router.route(host=target, name=name)
    route.pass_through()
    return route


def _keep_allowlist_last(router: Any) -> None:
    # respx resolves routes in order, so mocks registered after the
    # pass-through route must still win.
    try:
        route = router.pop(ALLOWLIST_ROUTE_NAME, None)
        if route is not None:
            router.add(route, name=ALLOWLIST_ROUTE_NAME)
    except (AttributeError, KeyError, TypeError) as exc:
        logger.debug("Could not reorder loopback pass-through route: %s", exc)


def wrap_route(original: Callable[..., Any]) -> Callable[..., Any]:
    """Keep the loopback pass-through route behind every new registration."""

    @functools.wraps(original)
    def route(self: Any, *patterns: Any, **lookups: Any) -> Any:
        registered = original(self, *patterns, **lookups)
        if lookups.get("name") != ALLOWLIST_ROUTE_NAME:
            _keep_allowlist_last(self)
        return registered

    return route


def wrap_pass_through(original: Callable[..., Any]) -> Callable[..., Any]:
    """Broaden a route allowing exactly ``host="127.0.0.1"`` through.

    Mocked routes for the numeric address keep their exact host.
    """

    @functools.wraps(original)
    def pass_through(self: Any, value: bool = True) -> Any:
        if value and self.pattern == NUMERIC_LOOPBACK:
            # Route.pattern has no public setter; snapshots still restore it.
            self._pattern = BROADENED_LOOPBACK
            logger.debug("Broadened loopback pass-through route %r", self)
        return original(self, value)

    return pass_through


def install_allowlist(router: Any = None, router_class: Any = None, route_class: Any = None) -> bool:
    """Wrap respx registration and allow both loopback forms once.

    Returns True if this call installed the wrappers.
    """
    router_class = router_class if router_class is not None else respx.MockRouter
    route_class = route_class if route_class is not None else respx.Route
    router = router if router is not None else respx.mock

    patch_attribute(route_class, "pass_through", wrap_pass_through)
    if not patch_attribute(router_class, "route", wrap_route):
        return False

    allow_connect(router, LOOPBACK_ADDRESS, name=ALLOWLIST_ROUTE_NAME)
    logger.info("Registered loopback pass-through route %r", ALLOWLIST_ROUTE_NAME)
    return True

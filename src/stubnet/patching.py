"""Idempotent attribute wrapping used by every installer."""

import logging
from collections.abc import Callable
from typing import Any

from stubnet.constants import WRAPPED_MARKER

logger = logging.getLogger(__name__)


def is_wrapped(func: Any) -> bool:
    """Return True if *func* was produced by one of our installers."""
    return bool(getattr(func, WRAPPED_MARKER, False))


def mark_wrapped(func: Any) -> Any:
    setattr(func, WRAPPED_MARKER, True)
    return func


def patch_attribute(
    owner: Any,
    name: str,
    make_wrapper: Callable[[Any], Any],
) -> bool:
    """Replace ``owner.name`` with ``make_wrapper(owner.name)`` once.

    Returns False (and leaves the attribute untouched) when the current
    attribute already carries the marker, so repeated installs from several
    load paths never stack wrappers.
    """
    current = getattr(owner, name)
    if is_wrapped(current):
        logger.debug("%s.%s already wrapped", _owner_name(owner), name)
        return False

    wrapper = mark_wrapped(make_wrapper(current))
    setattr(owner, name, wrapper)
    logger.debug("Wrapped %s.%s", _owner_name(owner), name)
    return True


def _owner_name(owner: Any) -> str:
    return getattr(owner, "__qualname__", None) or getattr(owner, "__name__", repr(owner))

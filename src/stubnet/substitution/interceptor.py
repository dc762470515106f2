"""Interceptor for ``re.sub`` calls that use the reserved pattern."""

import inspect
import logging
import re
from collections.abc import Callable
from typing import Any

from stubnet.constants import RESERVED_PATTERN, RESERVED_REPLACEMENT, SENTINEL_PHRASE
from stubnet.patching import is_wrapped, mark_wrapped

from .casing import preserve_case

logger = logging.getLogger(__name__)

SubFunc = Callable[..., Any]


class SubstitutionInterceptor:
    """Drop-in replacement for ``re.sub``.

    Calls whose pattern is ``Yale`` and replacement is ``Fale`` get
    case-preserving substitution; every other call goes straight to the
    wrapped function.
    """

    def __init__(self, original: SubFunc | None = None):
        self.original = original if original is not None else inspect.unwrap(re.sub)
        self.__wrapped__ = self.original

    def matches(self, pattern: Any, repl: Any) -> bool:
        """Return True if (pattern, repl) is the reserved pair."""
        source = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
        return source == RESERVED_PATTERN and repl == RESERVED_REPLACEMENT

    def __call__(self, pattern: Any, repl: Any, string: Any, count: int = 0, flags: int = 0) -> Any:
        if self.matches(pattern, repl):
            try:
                return self._substitute(pattern, string, count, flags)
            except Exception:
                logger.debug("Reserved substitution failed, using re.sub", exc_info=True)
        return self.original(pattern, repl, string, count=count, flags=flags)

    def _substitute(self, pattern: str | re.Pattern, string: str, count: int, flags: int) -> str:
        if SENTINEL_PHRASE in string:
            return string

        compiled = re.compile(pattern, flags)
        if compiled.flags & re.IGNORECASE:
            return compiled.sub(lambda match: preserve_case(match.group(0)), string, count=count)
        return compiled.sub(RESERVED_REPLACEMENT, string, count=count)


# Explicit adapter for call sites that should not depend on the global patch.
substitute = SubstitutionInterceptor()


def install_substitution(target: Any = re) -> SubstitutionInterceptor:
    """Replace ``target.sub`` with an interceptor, at most once.

    Returns the interceptor now installed on *target*.
    """
    current = target.sub
    if is_wrapped(current):
        return current

    interceptor = mark_wrapped(SubstitutionInterceptor(original=current))
    target.sub = interceptor
    logger.info("Installed reserved substitution on %s.sub", getattr(target, "__name__", target))
    return interceptor

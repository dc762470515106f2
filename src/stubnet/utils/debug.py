"""Debug output helpers for the CLI.

Debug state is thread-local so concurrent CLI invocations in tests do not
leak into each other.
"""

import logging
import threading
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

_debug_state = threading.local()


def set_debug_enabled(enabled: bool) -> None:
    """Set debug mode for the current thread."""
    _debug_state.enabled = enabled


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled for the current thread."""
    return getattr(_debug_state, "enabled", False)


def configure_logging(verbose: bool, console: Console | None = None) -> logging.Logger:
    """Route ``stubnet`` log records through rich, at DEBUG when *verbose*."""
    logger = logging.getLogger("stubnet")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if console is not None and not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))
    return logger


def debug_print(category: str, message: str, **data: Any) -> None:
    """Print debug information if debug mode is enabled.

    Args:
        category: Debug category (substitution, network, config)
        message: Main message to display
        **data: Additional key-value pairs to display
    """
    if not is_debug_enabled():
        return
    console = Console(stderr=True)
    console.print(f"[DEBUG:{category}] {message}", style="bold cyan")
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, str) and len(value) > 100:
            console.print(f"  {key}: {value[:100]}... ({len(value)} chars)", style="dim")
        else:
            console.print(f"  {key}: {value}", style="dim")

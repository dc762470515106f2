"""One-shot installation of all interceptors."""

import logging
import re
from dataclasses import dataclass, field

import httpx
import respx

from stubnet.allowlist import install_allowlist
from stubnet.config import Settings, load_settings
from stubnet.network import install_network
from stubnet.patching import is_wrapped
from stubnet.substitution import install_substitution

logger = logging.getLogger(__name__)


@dataclass
class InstallReport:
    """What a single :func:`install` call changed."""

    substitution: bool = False
    hosts: list[str] = field(default_factory=list)
    allowlist: bool = False

    @property
    def changed(self) -> bool:
        return self.substitution or bool(self.hosts) or self.allowlist


def install(settings: Settings | None = None) -> InstallReport:
    """Install every enabled interceptor; safe to call from several load paths."""
    if settings is None:
        settings = load_settings()

    report = InstallReport()
    if not settings.enabled:
        logger.info("stubnet disabled by configuration")
        return report

    if settings.substitution and not is_wrapped(re.sub):
        install_substitution(re)
        report.substitution = True
    if settings.hosts:
        report.hosts = install_network()
    if settings.allowlist:
        report.allowlist = install_allowlist()

    if report.changed:
        logger.debug("stubnet install report: %s", report)
    return report


def installed_components() -> dict[str, bool]:
    """Which interceptors are active in this process."""
    return {
        "substitution": is_wrapped(re.sub),
        "hosts": is_wrapped(httpx.HTTPTransport.handle_request),
        "allowlist": is_wrapped(respx.MockRouter.route),
    }


def is_installed() -> bool:
    return any(installed_components().values())

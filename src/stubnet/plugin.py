"""pytest plugin: installs stubnet when the test session is configured."""

from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

from stubnet.config import find_project_dir, load_settings
from stubnet.installer import install, installed_components
from stubnet.network import create_async_client, create_client
from stubnet.substitution import SubstitutionInterceptor
from stubnet.substitution import substitute as _substitute
from stubnet.utils.debug import configure_logging


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("stubnet", "loopback and substitution interception")
    group.addoption(
        "--no-stubnet",
        action="store_true",
        default=False,
        help="Do not install stubnet interceptors for this run.",
    )


def pytest_configure(config: pytest.Config) -> None:
    if config.getoption("no_stubnet", default=False):
        return

    rootpath = getattr(config, "rootpath", None)
    project_dir = find_project_dir(Path(rootpath)) if rootpath else None
    settings = load_settings(project_dir)
    configure_logging(settings.verbose)
    install(settings)


def pytest_report_header(config: pytest.Config) -> str:
    active = [name for name, on in installed_components().items() if on]
    return f"stubnet: {', '.join(active) if active else 'inactive'}"


@pytest.fixture
def substitute() -> SubstitutionInterceptor:
    """The explicit reserved-substitution adapter."""
    return _substitute


@pytest.fixture
def loopback_client() -> Iterator[httpx.Client]:
    """An httpx client whose requests to ``localhost`` hit 127.0.0.1."""
    with create_client() as client:
        yield client


@pytest_asyncio.fixture
async def async_loopback_client() -> AsyncIterator[httpx.AsyncClient]:
    """Async counterpart of ``loopback_client``."""
    async with create_async_client() as client:
        yield client

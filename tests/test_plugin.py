"""Tests for the pytest plugin hooks."""

from pathlib import Path

import pytest

from stubnet import plugin
from stubnet.config import Settings


class FakeConfig:
    def __init__(self, no_stubnet: bool = False, rootpath: Path | None = None):
        self.no_stubnet = no_stubnet
        self.rootpath = rootpath

    def getoption(self, name, default=None):
        assert name == "no_stubnet"
        return self.no_stubnet


@pytest.fixture
def install_calls(monkeypatch: pytest.MonkeyPatch, clean_env: Path) -> list[Settings]:
    calls: list[Settings] = []
    monkeypatch.setattr(plugin, "install", calls.append)
    return calls


class TestPytestConfigure:
    def test_installs_with_loaded_settings(self, install_calls, project_dir):
        (project_dir / ".stubnet" / ".env").write_text("STUBNET_ALLOWLIST=false\n")

        plugin.pytest_configure(FakeConfig(rootpath=project_dir))

        assert install_calls == [Settings(allowlist=False)]

    def test_no_stubnet_option_skips_install(self, install_calls, project_dir):
        plugin.pytest_configure(FakeConfig(no_stubnet=True, rootpath=project_dir))
        assert install_calls == []

    def test_environment_overrides_project(self, install_calls, project_dir, monkeypatch):
        (project_dir / ".stubnet" / ".env").write_text("STUBNET_HOSTS=true\n")
        monkeypatch.setenv("STUBNET_HOSTS", "off")

        plugin.pytest_configure(FakeConfig(rootpath=project_dir))

        assert install_calls[0].hosts is False


class TestReportHeader:
    def test_lists_active_components(self, monkeypatch):
        monkeypatch.setattr(
            plugin,
            "installed_components",
            lambda: {"substitution": True, "hosts": True, "allowlist": False},
        )
        assert plugin.pytest_report_header(FakeConfig()) == "stubnet: substitution, hosts"

    def test_inactive(self, monkeypatch):
        monkeypatch.setattr(plugin, "installed_components", lambda: {"hosts": False})
        assert plugin.pytest_report_header(FakeConfig()) == "stubnet: inactive"

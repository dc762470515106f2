"""Test configuration and fixtures for stubnet."""

import json
import os
import tempfile
import threading
from collections.abc import Generator, Iterator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest

from stubnet.config import Settings
from stubnet.installer import InstallReport, install


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Create a project directory with a .stubnet marker."""
    project_path = temp_dir / "test_project"
    project_path.mkdir()
    (project_path / ".stubnet").mkdir()
    return project_path


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> Path:
    """Drop STUBNET_* variables and point the home directory at a temp dir."""
    for key in list(os.environ):
        if key.startswith("STUBNET_"):
            monkeypatch.delenv(key)
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    return home


class _EchoHandler(BaseHTTPRequestHandler):
    """Reports the request headers it received as JSON."""

    def _send_json(self, payload: dict) -> None:
        body = json.dumps(payload).encode()
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _redirect(self, target: str) -> None:
        self.send_response(302)
        self.send_header("Location", f"http://localhost:{self.server.server_port}{target}")
        self.send_header("Content-Length", "0")
        self.end_headers()

    def do_GET(self) -> None:
        if self.path.startswith("/redirect"):
            self._redirect("/landed")
            return
        if self.path == "/login":
            self.send_response(204)
            self.send_header("Set-Cookie", "session=abc; Path=/")
            self.end_headers()
            return
        if self.path == "/to-whoami":
            self._redirect("/whoami")
            return
        if self.path == "/whoami":
            self._send_json(
                {
                    "host": self.headers.get("Host"),
                    "cookie": self.headers.get("Cookie"),
                    "authorization": self.headers.get("Authorization"),
                }
            )
            return
        self._send_json({"host": self.headers.get("Host"), "path": self.path})

    def do_POST(self) -> None:
        length = int(self.headers.get("Content-Length", "0"))
        data = self.rfile.read(length).decode() if length else ""
        self._send_json({"host": self.headers.get("Host"), "path": self.path, "body": data})

    def log_message(self, format: str, *args) -> None:
        pass


@pytest.fixture
def loopback_server() -> Iterator[ThreadingHTTPServer]:
    """A live HTTP server bound to 127.0.0.1 only."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _EchoHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


@pytest.fixture(scope="session")
def installed_layer() -> InstallReport:
    """The full layer installed on the real libraries for this process."""
    return install(Settings())

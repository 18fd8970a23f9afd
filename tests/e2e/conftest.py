"""E2E test configuration and fixtures for the landing page check.

Each check launches and closes its own browser, so there are no
session-scoped Playwright fixtures here. The only shared resource is the
fixture site, a small FastAPI app served by uvicorn in a background thread.
"""

import socket
import threading
import time

import httpx
import pytest
import uvicorn

from landing_check.config import Settings
from tests.e2e.fixture_site import app


def find_unused_port() -> int:
    sock = socket.socket()
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


@pytest.fixture(scope="session")
def landing_site():
    """Serve the landing page variants and return their root URL."""
    port = find_unused_port()

    def run_server():
        uvicorn.run(app, host="127.0.0.1", port=port, log_level="error")

    server_thread = threading.Thread(target=run_server, daemon=True)
    server_thread.start()

    # Wait for server to start
    server_url = f"http://127.0.0.1:{port}"
    for _ in range(30):  # Wait up to 30 seconds
        try:
            response = httpx.get(f"{server_url}/health", timeout=1)
            if response.status_code == 200:
                break
        except httpx.RequestError:
            time.sleep(1)
    else:
        raise RuntimeError("Fixture site failed to start")

    yield server_url


@pytest.fixture
def site_settings(landing_site):
    """Build settings for one page of the fixture site."""

    def build(path: str = "/", **overrides) -> Settings:
        values = {"base_url": f"{landing_site}{path}".rstrip("/"), "timeout_ms": 10_000}
        values.update(overrides)
        return Settings(**values)

    return build


@pytest.fixture
def unreachable_url():
    """A local URL nothing is listening on."""
    return f"http://127.0.0.1:{find_unused_port()}"

"""Fixtures for module tests using WireMock testcontainers."""

import json
from collections.abc import Generator
from pathlib import Path

import docker
import pytest
from docker.errors import DockerException
from testcontainers.core import testcontainers_config
from wiremock.constants import Config
from wiremock.testing.testcontainer import WireMockContainer


@pytest.fixture(scope="session", autouse=True)
def _disable_ryuk() -> None:
    """Disable the extra cleanup instance, we use contexts to clean containers."""
    testcontainers_config.ryuk_disabled = True


@pytest.fixture(scope="session")
def _require_docker() -> None:
    """Skip module tests when no Docker daemon is reachable."""
    try:
        docker.from_env().ping()
    except DockerException as e:
        pytest.skip(f"Docker is not available: {e}")


@pytest.fixture(scope="session")
def wiremock_server(_require_docker: None) -> Generator[WireMockContainer, None, None]:
    """Start WireMock container using wiremock's testcontainer support."""
    container = WireMockContainer(secure=False)

    with container as wm:
        Config.base_url = wm.get_url("__admin")
        yield wm
        print(wm.get_logs())


@pytest.fixture(scope="session")
def jenkins_host(wiremock_server: WireMockContainer) -> str:
    """URL of the mocked Jenkins as seen from the host."""
    return wiremock_server.get_base_url()


@pytest.fixture
def credentials_file(tmp_path: Path) -> Path:
    """Write a credentials file for the mocked Jenkins."""
    path = tmp_path / "credentials.json"
    path.write_text(json.dumps({"user": "jenkins-bot", "token": "api-token"}))
    return path

"""Shared test fixtures for aliddns tests."""

import io
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import yaml
from rich.console import Console
from typer.testing import CliRunner

from aliddns.config import AddressMode, DDNSConfig, EnvironmentSettings
from aliddns.providers.dns.base import DNSProvider


# ============================================================================
# CLI Fixtures
# ============================================================================


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


# ============================================================================
# Project Directory Fixtures
# ============================================================================


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch) -> Path:
    """Create a temporary directory with aliddns.yaml."""
    config_data = {
        "rr": "ddns",
        "domain": "example.com",
        "mode": "both",
        "interval": 0,
        "timeout": 5,
    }

    config_file = tmp_path / "aliddns.yaml"
    with open(config_file, "w") as f:
        yaml.dump(config_data, f)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ============================================================================
# Mock Fixtures - HTTP/API
# ============================================================================


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.Client for provider API calls."""
    with patch("httpx.Client") as mock_client_class:
        mock_client = MagicMock()
        mock_client_class.return_value = mock_client
        yield mock_client


@pytest.fixture
def mock_provider() -> MagicMock:
    """Provide a DNS provider mock usable as a context manager."""
    provider = MagicMock(spec=DNSProvider)
    provider.__enter__.return_value = provider
    return provider


# ============================================================================
# Mock Fixtures - Environment Settings
# ============================================================================


@pytest.fixture
def mock_env_settings():
    """Mock environment settings with test credentials."""
    settings = EnvironmentSettings(
        access_key_id="testid",
        access_key_secret="testsecret",
    )
    with patch("aliddns.commands.dns.load_env_settings", return_value=settings):
        yield settings


@pytest.fixture
def mock_env_settings_missing():
    """Mock environment settings without credentials."""
    settings = EnvironmentSettings(
        access_key_id=None,
        access_key_secret=None,
    )
    with patch("aliddns.commands.dns.load_env_settings", return_value=settings):
        yield settings


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_config() -> DDNSConfig:
    """Provide a sample IPv4-only DDNSConfig instance."""
    return DDNSConfig(rr="ddns", domain="example.com", mode=AddressMode.IPV4)


@pytest.fixture
def both_config() -> DDNSConfig:
    """Provide a sample DDNSConfig synchronizing both families."""
    return DDNSConfig(rr="ddns", domain="example.com", mode=AddressMode.BOTH)


@pytest.fixture
def console() -> Console:
    """Provide a console that writes plain text to a buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def describe_one_record() -> dict:
    """Provide a DescribeSubDomainRecords response with a single A record."""
    return {
        "TotalCount": 1,
        "PageNumber": 1,
        "PageSize": 20,
        "RequestId": "536E9CAD-DB30-4647-AC87-AA5CC38C5382",
        "DomainRecords": {
            "Record": [
                {
                    "RR": "ddns",
                    "Line": "default",
                    "Status": "ENABLE",
                    "Locked": False,
                    "Type": "A",
                    "DomainName": "example.com",
                    "Value": "203.0.113.5",
                    "RecordId": "123",
                    "TTL": 600,
                }
            ]
        },
    }

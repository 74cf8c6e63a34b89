"""Configuration management for aliddns."""

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aliddns.models import AddressFamily

CONFIG_FILENAMES = ("aliddns.yaml", "aliddns.yml")


class AddressMode(str, Enum):
    """Which address families get synchronized."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    BOTH = "both"

    @property
    def families(self) -> list[AddressFamily]:
        if self is AddressMode.IPV4:
            return [AddressFamily.IPV4]
        if self is AddressMode.IPV6:
            return [AddressFamily.IPV6]
        return [AddressFamily.IPV4, AddressFamily.IPV6]


class EndpointsConfig(BaseModel):
    """Remote API endpoints."""

    model_config = ConfigDict(frozen=True)

    alidns: str = "https://alidns.aliyuncs.com/"
    ipv4: str = "https://api.ipify.org/?format=json"
    ipv6: str = "https://api6.ipify.org/?format=json"

    def ip_echo_url(self, family: AddressFamily) -> str:
        return self.ipv4 if family is AddressFamily.IPV4 else self.ipv6


class DDNSConfig(BaseModel):
    """Main configuration for aliddns."""

    model_config = ConfigDict(frozen=True)

    rr: str  # Subdomain label, "@" for the bare domain
    domain: str
    mode: AddressMode = AddressMode.IPV4
    interval: int = Field(default=0, ge=0)  # Seconds, 0 runs once
    timeout: float = Field(default=10.0, gt=0)
    endpoints: EndpointsConfig = Field(default_factory=EndpointsConfig)

    @field_validator("rr", "domain")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip().strip(".")
        if not v:
            raise ValueError("must not be empty")
        return v


class EnvironmentSettings(BaseSettings):
    """Environment variables for sensitive configuration."""

    model_config = SettingsConfigDict(env_prefix="ALIDDNS_", env_file=".env", extra="ignore")

    access_key_id: str | None = None
    access_key_secret: str | None = None


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find aliddns.yaml in current or parent directories."""
    search_path = start_path or Path.cwd()

    for path in [search_path, *search_path.parents]:
        for name in CONFIG_FILENAMES:
            config_file = path / name
            if config_file.exists():
                return config_file

    return None


def load_config(config_path: Path | None = None) -> DDNSConfig:
    """Load configuration from YAML file."""
    if config_path is None:
        config_path = find_config_file()

    if config_path is None or not config_path.exists():
        raise FileNotFoundError(
            "No aliddns.yaml found. Run 'aliddns init' to create one."
        )

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return DDNSConfig(**data)


def load_env_settings() -> EnvironmentSettings:
    """Load environment settings from .env and environment variables."""
    return EnvironmentSettings()


def get_fqdn(config: DDNSConfig) -> str:
    """Get the fully qualified name of the managed record."""
    if config.rr == "@":
        return config.domain
    return f"{config.rr}.{config.domain}"

"""
Connection configuration for a Samsung air conditioner.
"""

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from asyncsamsungac.exceptions.config import ConfigurationError


class AirConditionerConfig(BaseModel):
    """
    Configuration for one air conditioner including connection parameters.

    Field aliases accept the camelCase keys used by existing plugin
    configuration files (``ip``, ``patchCert``, ``deviceIndex`` ...).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Host address (IP or hostname)
    host: str = Field(
        alias="ip",
        description="IP address or hostname of the air conditioner"
    )

    port: int = Field(
        default=8888,
        description="Port of the local REST API"
    )

    # Bearer token obtained from the device
    token: str = Field(
        description="Bearer token sent in the Authorization header"
    )

    # Client certificate presented during the TLS handshake
    cert_path: str = Field(
        alias="patchCert",
        description="Path to the PEM client certificate"
    )

    device_index: int = Field(
        default=0,
        alias="deviceIndex",
        description="Position of the unit in the /devices response, used for reads and writes"
    )

    # Seconds a fetched state is trusted without revalidation
    cache_ttl: float = Field(
        default=3.0,
        alias="cacheTtl",
        description="Cache time-to-live in seconds"
    )

    timeout: float = Field(
        default=5.0,
        description="Request timeout in seconds"
    )

    eager_refresh: bool = Field(
        default=True,
        alias="eagerRefresh",
        description="Refresh the cache right after a successful command"
    )

    name: Optional[str] = Field(
        default=None,
        description="User-friendly name for the unit"
    )

    serial_number: str = Field(
        default="DefaultSN",
        alias="serialNumber",
        description="Serial number reported in the accessory information"
    )

    @field_validator('host')
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Validate host format."""
        if not v or len(v) < 3:
            raise ValueError("Host must be a valid IP address or hostname")
        return v

    @field_validator('token', 'cert_path')
    @classmethod
    def validate_required(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Value must not be empty")
        return v

    @field_validator('device_index')
    @classmethod
    def validate_device_index(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Device index must not be negative")
        return v

    @field_validator('cache_ttl')
    @classmethod
    def validate_cache_ttl(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Cache TTL must not be negative")
        return v

    @field_validator('timeout')
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeout must be positive")
        return v

    @property
    def base_url(self) -> str:
        """Base URL of the device REST API."""
        return f"https://{self.host}:{self.port}"

    @classmethod
    def from_dict(cls, data: dict) -> "AirConditionerConfig":
        """Build a configuration from a plain dictionary.

        ``cacheDuration`` is accepted in milliseconds for compatibility with
        plugin configuration files.
        """
        data = dict(data)
        if "cacheDuration" in data and "cache_ttl" not in data and "cacheTtl" not in data:
            data["cache_ttl"] = data.pop("cacheDuration") / 1000.0
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "AirConditionerConfig":
        """Load a configuration from a JSON file."""
        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Cannot read configuration {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration {path} must contain a JSON object")
        return cls.from_dict(data)

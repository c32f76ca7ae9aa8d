"""
Shared configuration management for the Micro Bookstore services.
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKSTORE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Backend services (consumed by the gateway)
    inventory_service_url: str = Field(default="http://localhost:3002")
    shipping_service_url: str = Field(default="http://localhost:3001")
    backend_timeout_seconds: float = Field(default=5.0, gt=0)

    # Inventory service
    catalog_file: Optional[str] = Field(default=None)

    # Browser access
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    # Observability
    enable_tracing: bool = Field(default=False)
    otel_exporter: str = Field(default="http://localhost:4317")
    enable_console_tracing: bool = Field(default=False)


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int
    host: str = "0.0.0.0"

    def __init__(self, service_name: str, port: int, **kwargs):
        super().__init__(service_name=service_name, port=port, **kwargs)


def get_config(service_name: str, port: int) -> ServiceConfig:
    """Get configuration for a specific service."""
    return ServiceConfig(service_name=service_name, port=port)

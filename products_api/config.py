"""
Application settings.

``Settings`` is a plain dataclass whose defaults are read from environment
variables when this module is imported. Set the variables before importing,
or build a ``Settings`` explicitly and pass it to ``create_app``.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class Settings:
    """Settings for the Products API, loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Products API")
    api_version: str = os.getenv("API_VERSION", "v1")
    description: str = os.getenv("API_DESCRIPTION", "A sample Web API for managing products")
    contact_name: str = os.getenv("CONTACT_NAME", "API Support")
    contact_email: str = os.getenv("CONTACT_EMAIL", "support@example.com")

    # "development" serves the interactive docs at the site root.
    environment: str = os.getenv("ENVIRONMENT", "development")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8085"))

    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))
    https_redirect: bool = _env_flag("HTTPS_REDIRECT", "false")

    # Start with the three sample products.
    seed_catalog: bool = _env_flag("SEED_CATALOG", "true")

    # Registers POST /api/products/reset; meant for demos only.
    enable_reset: bool = _env_flag("ENABLE_RESET", "false")

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


settings = Settings()

# shoprest/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_API_VERSION, DEFAULT_USER_AGENT


class ShopSettings(BaseSettings):
    """
    Manages user-configurable settings for the shoprest client, loaded from
    environment variables (prefixed with 'SHOPREST_') or a .env file.

    Only the shop domain and access token are needed to talk to a shop; the
    remaining fields tune transport behavior.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="SHOPREST_",
        extra="ignore",
        case_sensitive=False,
    )

    # --- Shop Settings ---
    shop_domain: str | None = Field(
        default=None,
        description="Shop subdomain or *.myshopify.com domain, e.g. 'my-shop'",
    )
    access_token: str | None = Field(
        default=None, description="Admin API access token for the shop"
    )
    api_version: str = Field(
        default=DEFAULT_API_VERSION, description="Admin REST API version"
    )

    # --- Client Behavior Settings ---
    request_timeout: float = Field(
        default=30.0, description="Default request timeout in seconds"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header for requests",
    )

    # --- Retry Settings (opt-in) ---
    retry_requests: bool = Field(
        default=False,
        description="Use RetryExecutionPolicy when no execution policy is given",
    )
    max_retries: int = Field(
        default=3, description="Maximum number of retries when retrying is enabled"
    )
    backoff_factor: float = Field(
        default=0.5, description="Backoff factor for retries (seconds)"
    )


@lru_cache
def get_settings() -> ShopSettings:
    """
    Provides access to the shoprest settings.

    Settings are loaded from environment variables (prefixed with 'SHOPREST_')
    or .env/secrets.env files. The instance is cached for performance.

    Returns:
        ShopSettings: The settings instance.
    """
    return ShopSettings()

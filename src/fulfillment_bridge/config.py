"""Configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Shopify (storefront)
    shopify_store_domain: str = Field(
        default="",
        validation_alias=AliasChoices("shopify_store_domain", "SHOPIFY_STORE"),
        description="Shopify store domain (e.g., my-store.myshopify.com)",
    )
    shopify_access_token: str = Field(
        default="",
        validation_alias=AliasChoices("shopify_access_token", "SHOPIFY_TOKEN"),
        description="Shopify Admin API access token",
    )
    shopify_api_version: str = Field(
        default="2025-01",
        description="Shopify Admin REST API version",
    )
    shopify_location_id: str = Field(
        default="",
        description="Shopify location used for fulfillments",
    )
    shopify_webhook_secret: str = Field(
        default="",
        description="Shared secret for Shopify webhook HMAC verification",
    )

    # FinerWorks (fulfillment provider)
    finerworks_api_base: str = Field(
        default="https://api.finerworks.com/v3",
        description="FinerWorks API base URL",
    )
    finerworks_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("finerworks_api_key", "FINERWORKS_KEY"),
        description="FinerWorks API (app) key",
    )
    finerworks_web_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("finerworks_web_api_key", "FINERWORKS_WEB_KEY"),
        description="FinerWorks web API key",
    )
    finerworks_test_sku: str = Field(
        default="AP98520P583742",
        description="SKU queried by the diagnostic endpoint",
    )

    # Sync behaviour
    vendor_name: str = Field(
        default="FinerWorks",
        description="Vendor tag applied to products synced into Shopify",
    )
    http_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for outbound HTTP calls",
    )

    # API Settings
    api_title: str = Field(
        default="Fulfillment Bridge",
        description="API title",
    )
    api_version: str = Field(
        default="0.1.0",
        description="API version",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Bind address for the HTTP server",
    )
    port: int = Field(
        default=3000,
        description="Port for the HTTP server",
    )

    # Observability
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=True,
        description="Enable JSON structured logging",
    )
    enable_metrics: bool = Field(
        default=True,
        description="Expose Prometheus metrics on /metrics",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class BankingConfig(BaseSettings):
    """Pocket bank configuration"""

    model_config = SettingsConfigDict(
        env_prefix="POCKET_BANK_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    # Directory configuration
    directory_layout: Literal["array", "linked"] = "array"  # array keeps insertion order

    # Display configuration
    currency_symbol: str = "$"


# Global configuration instance
config = BankingConfig()


def get_config() -> BankingConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankingConfig:
    """Reload configuration from environment"""
    global config
    config = BankingConfig()
    return config

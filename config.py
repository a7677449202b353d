"""
Configuration module for environment variable validation and type-safe config.

This module reads the profile service settings from the environment
and provides a type-safe configuration object.
"""
import math
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_RECORD_SERVICE_URL = (
    "https://shareframe.social/xrpc/com.atproto.repo.putRecord"
)
DEFAULT_RECORD_COLLECTION = "social.shareframe.profile"
DEFAULT_USERS_TABLE = "Users"


@dataclass
class Config:
    """Type-safe configuration object with validated environment variables."""

    users_table: str = DEFAULT_USERS_TABLE
    record_service_url: str = DEFAULT_RECORD_SERVICE_URL
    record_collection: str = DEFAULT_RECORD_COLLECTION
    record_service_timeout: float = 10.0
    aws_region: str = "us-east-1"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config instance from environment variables.

        Raises:
            ValueError: If an environment variable is set to an invalid value.
        """
        users_table = os.environ.get("USERS_TABLE") or DEFAULT_USERS_TABLE
        record_service_url = (
            os.environ.get("RECORD_SERVICE_URL") or DEFAULT_RECORD_SERVICE_URL
        )
        record_collection = (
            os.environ.get("RECORD_COLLECTION") or DEFAULT_RECORD_COLLECTION
        )

        raw_timeout = os.environ.get("RECORD_SERVICE_TIMEOUT", "10")
        try:
            record_service_timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"RECORD_SERVICE_TIMEOUT must be a number, got: {raw_timeout}"
            )
        if not math.isfinite(record_service_timeout) or record_service_timeout <= 0:
            raise ValueError(
                f"RECORD_SERVICE_TIMEOUT must be a finite positive number, got: {raw_timeout}"
            )

        aws_region = os.environ.get("AWS_REGION", "us-east-1")
        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

        # Validate log level
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if log_level not in valid_log_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {valid_log_levels}, got: {log_level}"
            )

        return cls(
            users_table=users_table,
            record_service_url=record_service_url,
            record_collection=record_collection,
            record_service_timeout=record_service_timeout,
            aws_region=aws_region,
            log_level=log_level,
        )


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the cached configuration instance.

    Returns:
        Config: The validated configuration object

    Raises:
        ValueError: If an environment variable is invalid.
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config

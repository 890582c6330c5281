"""Application settings

Settings are loaded in order of precedence (highest to lowest):
1. Environment variables (NEPHELE_*)
2. Config file (~/.nephele/config.toml)
3. Default values
"""

import logging
import sys
from pathlib import Path
from typing import Any, Type

from pydantic import ConfigDict, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from nephele.exceptions import ConfigurationError

# Import tomllib (Python 3.11+) or tomli (Python 3.9-3.10)
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger("nephele")

OUTPUT_FORMATS = ("table", "json", "csv")


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".nephele" / "config.toml"


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config file."""

    def get_field_value(
        self, field: Any, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get field value from TOML config."""
        config_data = self._load_config()
        if field_name in config_data:
            return config_data[field_name], field_name, False
        return None, field_name, False

    def _load_config(self) -> dict:
        """Load config from TOML file."""
        if not hasattr(self, '_config_cache'):
            self._config_cache = {}
            config_path = get_config_path()
            if config_path.exists():
                try:
                    with open(config_path, "rb") as f:
                        self._config_cache = tomllib.load(f)
                except (OSError, tomllib.TOMLDecodeError) as e:
                    logger.warning(f"Ignoring unreadable config file {config_path}: {e}")
        return self._config_cache

    def __call__(self) -> dict[str, Any]:
        """Return all settings from config file."""
        return self._load_config()


class Settings(BaseSettings):
    """Application settings

    Settings can be configured via:
    - Environment variables: NEPHELE_<SETTING_NAME>
    - Config file: ~/.nephele/config.toml

    Example config.toml:
        aws_region = "eu-west-1"
        aws_profile = "my-profile"
        output_format = "json"
    """

    model_config = ConfigDict(
        env_prefix="NEPHELE_",
        case_sensitive=False
    )

    aws_region: str = "us-east-1"
    aws_profile: str | None = None

    # Timeout configuration (in seconds)
    aws_connect_timeout: int = 10
    aws_read_timeout: int = 60
    aws_max_attempts: int = 3  # botocore retry attempts per API call

    # S3 configuration
    s3_max_keys: int = 1000  # Objects fetched per list-objects page

    # Output configuration
    output_format: str = "table"

    @field_validator("output_format")
    @classmethod
    def _check_output_format(cls, value: str) -> str:
        value = value.lower()
        if value not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got '{value}'"
            )
        return value

    @field_validator("s3_max_keys")
    @classmethod
    def _check_max_keys(cls, value: int) -> int:
        if not 1 <= value <= 1000:
            raise ValueError("s3_max_keys must be between 1 and 1000")
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources order.

        Order (highest to lowest priority):
        1. Init settings (passed to constructor)
        2. Environment variables
        3. TOML config file
        """
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )


def load_settings() -> Settings:
    """Load settings, raising ConfigurationError on invalid values"""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"invalid configuration: {e}") from e


def create_default_config() -> str:
    """Generate default config file content."""
    return '''# nephele configuration
# Place this file at ~/.nephele/config.toml

# AWS Configuration
# aws_region = "us-east-1"
# aws_profile = "default"

# Timeout Configuration (in seconds)
# aws_connect_timeout = 10
# aws_read_timeout = 60
# aws_max_attempts = 3

# S3 Configuration
# s3_max_keys = 1000            # Objects per list-objects page (max 1000)

# Output Configuration
# output_format = "table"       # table, json or csv
'''

"""Application configuration via Pydantic Settings.

Settings are read from init kwargs, environment variables, ``.env`` and
finally ``data/config.json``, in that order of precedence.
The JSON file may use either snake_case field names or the camelCase keys
(``cfgVersion``, ``costPerRecipient``, ``txtTemplate``, ``listingTemplate``)
written by earlier releases of the outreach tool.
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# Bumped whenever the shape of data/config.json changes incompatibly
CONFIG_VERSION = 1

DEFAULT_TXT_TEMPLATE = "Endorsed candidates:\n$listings\nFor more info, see our website."
DEFAULT_LISTING_TEMPLATE = "$candidate - $office\n"


class Settings(BaseSettings):
    """Application settings loaded from the environment and the JSON config file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        json_file="data/config.json",
        json_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    config_version: int = Field(
        default=CONFIG_VERSION,
        validation_alias=AliasChoices("config_version", "cfgVersion"),
        description="Structure version of the config file; must match CONFIG_VERSION",
    )

    @field_validator("config_version")
    @classmethod
    def validate_config_version(cls, v: int) -> int:
        if v != CONFIG_VERSION:
            msg = (
                f"Configuration version mismatch: expected {CONFIG_VERSION}, got {v}. "
                "Update data/config.json to the current structure."
            )
            raise ValueError(msg)
        return v

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///data/vdt.db",
        description="SQLAlchemy async connection string for the backing store",
    )

    # Messaging
    cost_per_recipient: float = Field(
        default=0.0,
        validation_alias=AliasChoices("cost_per_recipient", "costPerRecipient"),
        description="Cost charged per message recipient",
        ge=0,
    )
    txt_template: str = Field(
        default=DEFAULT_TXT_TEMPLATE,
        validation_alias=AliasChoices("txt_template", "txtTemplate"),
        description="Message body template; $listings is replaced with the candidate listings",
    )
    listing_template: str = Field(
        default=DEFAULT_LISTING_TEMPLATE,
        validation_alias=AliasChoices("listing_template", "listingTemplate"),
        description="Per-candidate listing template using $candidate and $office",
    )

    @field_validator("txt_template")
    @classmethod
    def validate_txt_template(cls, v: str) -> str:
        if "$listings" not in v:
            msg = "txt_template must contain the $listings placeholder"
            raise ValueError(msg)
        return v

    @field_validator("listing_template")
    @classmethod
    def validate_listing_template(cls, v: str) -> str:
        if "$candidate" not in v:
            msg = "listing_template must contain the $candidate placeholder"
            raise ValueError(msg)
        return v

    # Grouping
    grouping_hash_length: int = Field(
        default=6,
        description="Number of hex characters kept from the SHA-256 grouping digest",
        ge=6,
        le=64,
    )

    # Export
    export_dir: str = Field(
        default="./exports",
        description="Directory for export output files",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()

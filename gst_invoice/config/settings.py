from decimal import Decimal

from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Read env from the process + optionally from a local .env file
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    # App
    ENVIRONMENT: str = Field(default="dev", validation_alias=AliasChoices("ENVIRONMENT", "environment"))
    APP_NAME: str = Field(default="gst_invoice", validation_alias=AliasChoices("APP_NAME", "app_name"))
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))

    # Invoicing defaults. DEFAULT_GST_RATE is only ever handed to the order
    # mapper explicitly; the tax calculators never fall back to it.
    DEFAULT_GST_RATE: Decimal = Field(
        default=Decimal("18"),
        ge=0,
        validation_alias=AliasChoices("DEFAULT_GST_RATE", "default_gst_rate"),
    )
    DEFAULT_UNIT: str = Field(default="UNT", validation_alias=AliasChoices("DEFAULT_UNIT", "default_unit"))
    CURRENCY: str = Field(default="INR", validation_alias=AliasChoices("CURRENCY", "currency"))


settings = Settings()

"""i18nkit configuration settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Translation registry configuration settings."""

    DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    LOCALES_DIR: str = Field(default="", alias="I18N_LOCALES_DIR")
    SEPARATOR: str = Field(default=".", alias="I18N_SEPARATOR")
    DEBUG: bool = Field(default=False, alias="I18N_DEBUG")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("SEPARATOR", mode="before")
    @classmethod
    def _default_separator(cls, v):
        """An empty separator means the default one."""
        if v is None or v == "":
            return "."
        return v


class Settings(BaseSettings):
    """i18nkit configuration settings."""

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production."""
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()

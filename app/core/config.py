# app/core/config.py
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Metadata
    PROJECT_NAME: str = "Fixer Currency Converter"
    PROJECT_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"

    # Fixer (the free plan quotes everything against EUR)
    FIXER_API_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("FIXER_API_KEY", "API_KEY"),
    )
    FIXER_BASE_URL: str = "http://data.fixer.io/api"
    FIXER_TIMEOUT: float = 10.0

    # Rate limiting (requests/minute per IP)
    RATE_LIMIT: str = "60/minute"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # TLS (if serving HTTPS directly)
    SSL_KEYFILE: str | None = "ssl/key.pem"
    SSL_CERTFILE: str | None = "ssl/cert.pem"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()

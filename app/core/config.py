from pydantic_settings import BaseSettings
from pydantic import field_validator
from dotenv import load_dotenv
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from typing import List

load_dotenv()


class Settings(BaseSettings):
    DATABASE_URL: str

    # Public URLs used to build confirmation links and redirects
    API_BASE_URL: str
    WEB_BASE_URL: str

    HOST: str = "0.0.0.0"
    PORT: int = 3333

    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 465
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_USE_SSL: bool = True
    SMTP_STARTTLS: bool = False
    SMTP_TIMEOUT: int = 15

    MAIL_SENDER_NAME: str = "Trip Planner"
    MAIL_SENDER_ADDRESS: str = "no-reply@tripplanner.local"

    # Calendar days are computed in this timezone
    TIMEZONE: str = "UTC"

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    PROJECT_NAME: str = "Trip Planner API"
    PROJECT_VERSION: str = "1.0.0"
    PROJECT_DESCRIPTION: str = "Plan trips, invite participants, manage activities and links"

    class Config:
        env_file = ".env"

    @field_validator("API_BASE_URL", "WEB_BASE_URL")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("must be an http(s) URL")
        return value.rstrip("/")

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("must be between 1 and 65535")
        return value

    @field_validator("TIMEZONE")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"unknown timezone {value!r}") from None
        return value

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.TIMEZONE)


def load_settings(**overrides) -> Settings:
    """Build the settings once at process start; raises on missing or malformed values."""
    return Settings(**overrides)

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # App
    ENV: str = "development"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Database (PostgreSQL, schema owned by the POS application)
    DATABASE_URL: str
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_ECHO: bool = False

    # Reports
    REPORT_TIMEZONE: str = "UTC"  # Zone used for start/end of day bounds
    TOP_SELLING_PRODUCTS_LIMIT: int = 20
    DAILY_SUMMARY_DAYS: int = Field(5, ge=1)  # Today + 4 previous days

    # Frontend
    WEB_APP_URL: str = "http://localhost:9002"

    model_config = {
        "env_file": ".env",
        "extra": "ignore"
    }

    @field_validator('REPORT_TIMEZONE')
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v

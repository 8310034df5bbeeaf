from functools import lru_cache
from typing import Literal
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    app_title: str = Field(default="Ticket Purchase API")
    log_level: LogLevel = Field(default="INFO")
    audit_enabled: bool = Field(default=True)


@lru_cache
def get_settings() -> Settings:
    return Settings(
        app_title=os.getenv("APP_TITLE", Settings.model_fields["app_title"].default),
        log_level=os.getenv("LOG_LEVEL", Settings.model_fields["log_level"].default).upper(),
        audit_enabled=bool(int(os.getenv("AUDIT_ENABLED", "1"))),
    )

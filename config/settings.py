from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Core
    ENVIRONMENT: str = Field(default="production")
    SERVICE_NAME: str = Field(default="sms-notifier")
    LOG_LEVEL: str = Field(default="INFO")

    # Twilio (all three required, otherwise SMS sending stays disabled)
    SMS_TWILIO_SID: str = Field(default="")
    SMS_TWILIO_TOKEN: str = Field(default="")
    SMS_TWILIO_PHONE: str = Field(default="")  # sender number issued by Twilio


settings = Settings()

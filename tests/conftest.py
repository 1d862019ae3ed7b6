from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from config.provider import ProviderConfig
from config.settings import Settings
from messaging.dispatcher import MessageDispatcher
from messaging.sms import SmsClient


class FakeSmsClient(SmsClient):
    """Records every send; numbers in `failing` raise `errors[number]` (or a RuntimeError)."""

    def __init__(self, failing=(), errors: Optional[Dict[str, Exception]] = None):
        self.failing = set(failing)
        self.errors = errors or {}
        self.calls: List[Dict[str, str]] = []

    def send_message(self, to_number: str, text: str) -> str:
        self.calls.append({"to_number": to_number, "text": text})
        if to_number in self.failing:
            raise self.errors.get(to_number) or RuntimeError(f"rejected {to_number}")
        return f"SM{len(self.calls):04d}"


class CapturingLogger:
    def __init__(self):
        self.records: List[Dict] = []

    def _record(self, level, msg, *args, **kwargs):
        self.records.append({"level": level, "message": msg % args if args else msg, "extra": kwargs.get("extra")})

    def warning(self, msg, *args, **kwargs):
        self._record("WARNING", msg, *args, **kwargs)

    def info(self, msg, *args, **kwargs):
        self._record("INFO", msg, *args, **kwargs)

    def error(self, msg, *args, **kwargs):
        self._record("ERROR", msg, *args, **kwargs)

    def warnings(self) -> List[str]:
        return [r["message"] for r in self.records if r["level"] == "WARNING"]


def make_settings(sid: str = "AC123", token: str = "secret", phone: str = "+15550000000") -> Settings:
    return Settings(_env_file=None, SMS_TWILIO_SID=sid, SMS_TWILIO_TOKEN=token, SMS_TWILIO_PHONE=phone)


@pytest.fixture
def enabled_config() -> ProviderConfig:
    return ProviderConfig(account_sid="AC123", auth_token="secret", sender_phone="+15550000000")


@pytest.fixture
def disabled_config() -> ProviderConfig:
    return ProviderConfig(missing=("sms_twilio_token",))


@pytest.fixture
def fake_sms() -> FakeSmsClient:
    return FakeSmsClient()


@pytest.fixture
def dispatcher(fake_sms) -> MessageDispatcher:
    return MessageDispatcher(fake_sms)

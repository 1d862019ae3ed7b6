from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from config.settings import Settings, settings as default_settings

log = logging.getLogger("sms.config")

# env key -> Settings attribute
PROVIDER_KEYS: Tuple[Tuple[str, str], ...] = (
    ("sms_twilio_sid", "SMS_TWILIO_SID"),
    ("sms_twilio_token", "SMS_TWILIO_TOKEN"),
    ("sms_twilio_phone", "SMS_TWILIO_PHONE"),
)


@dataclass(frozen=True)
class ProviderConfig:
    account_sid: str = ""
    auth_token: str = ""
    sender_phone: str = ""
    missing: Tuple[str, ...] = ()

    @property
    def enabled(self) -> bool:
        return not self.missing

    def __repr__(self) -> str:
        # never echo the auth token
        return (
            f"ProviderConfig(account_sid={self.account_sid!r}, sender_phone={self.sender_phone!r}, "
            f"enabled={self.enabled}, missing={self.missing!r})"
        )


def load_provider_config(
    settings: Optional[Settings] = None,
    logger: Optional[logging.Logger] = None,
) -> ProviderConfig:
    """
    Build the provider config once, at startup.
    A missing or blank key is reported through `logger` and leaves the config disabled;
    nothing here raises.
    """
    settings = settings or default_settings
    logger = logger or log

    values = {}
    missing = []
    for key, attr in PROVIDER_KEYS:
        value = (getattr(settings, attr, "") or "").strip()
        if not value:
            logger.warning(
                "${%s} environment variable must be set to use SMS notifications",
                key,
                extra={"extra": {"event": "sms_config_missing", "key": key}},
            )
            missing.append(key)
        values[attr] = value

    return ProviderConfig(
        account_sid=values["SMS_TWILIO_SID"],
        auth_token=values["SMS_TWILIO_TOKEN"],
        sender_phone=values["SMS_TWILIO_PHONE"],
        missing=tuple(missing),
    )

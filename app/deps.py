from __future__ import annotations

from functools import lru_cache

from notification.sms import SmsNotification


@lru_cache(maxsize=1)
def get_notifier() -> SmsNotification:
    """Process-wide notifier; config is read from the environment exactly once."""
    return SmsNotification.from_env()

from __future__ import annotations

from typing import Any, Optional

from twilio.rest import Client

from config.provider import ProviderConfig


class SmsClient:
    def send_message(self, to_number: str, text: str) -> str:
        """Send one SMS and return the provider message id. Raises on failure."""
        raise NotImplementedError("SmsClient.send_message() must be implemented by a provider client")


class TwilioSmsClient(SmsClient):
    def __init__(self, config: ProviderConfig, client: Optional[Any] = None):
        if not config.enabled:
            raise RuntimeError(f"Twilio not configured, missing: {', '.join(config.missing)}")
        self.from_number = config.sender_phone
        self.client = client or Client(config.account_sid, config.auth_token)

    def send_message(self, to_number: str, text: str) -> str:
        msg = self.client.messages.create(to=to_number, from_=self.from_number, body=text)
        return str(getattr(msg, "sid", "") or "")

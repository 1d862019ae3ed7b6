"""
Twilio-backed SMS notifications.

Requires three environment variables (see config.provider):
  sms_twilio_sid    - Twilio account SID
  sms_twilio_token  - Twilio auth token
  sms_twilio_phone  - sender phone number issued by Twilio

If any of them is missing the notifier is built in a disabled state and every
send returns a configuration failure.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from config.provider import ProviderConfig, load_provider_config
from config.settings import Settings
from messaging.dispatcher import MessageDispatcher, SmsAttempt
from messaging.sms import TwilioSmsClient
from notification.base import Message, Notification, NotificationResult, Recipient, failure, success
from utils.phone import dest_hint, format_numbers, is_blank, usable_numbers

log = logging.getLogger("sms.notification")

MISSING_CONFIGURATION = "Can not send an SMS - missing proper configuration, check logs for missing variables"
MISSING_BODY_OR_PHONE = "Can not send an SMS - message body or recipient's phone number is missing"


class SmsNotification(Notification):
    def __init__(
        self,
        config: ProviderConfig,
        dispatcher: Optional[MessageDispatcher] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.log = logger or log
        self.dispatcher: Optional[MessageDispatcher] = None
        if config.enabled:
            self.dispatcher = dispatcher or MessageDispatcher(TwilioSmsClient(config))

    @classmethod
    def from_env(
        cls,
        settings: Optional[Settings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "SmsNotification":
        return cls(load_provider_config(settings=settings, logger=logger), logger=logger)

    @property
    def enabled(self) -> bool:
        return self.dispatcher is not None

    def send_notification(self, message: Message, recipient: Recipient) -> NotificationResult:
        """
        Send `message` to every non-blank phone number of `recipient`.
        A failure on any number makes the whole result a failure.
        """
        if message is None:
            raise TypeError("message cannot be None")
        if recipient is None:
            raise TypeError("recipient cannot be None")

        if not self.enabled:
            return failure(MISSING_CONFIGURATION)

        numbers = usable_numbers(recipient.phone_numbers)
        if is_blank(message.body) or not numbers:
            return failure(MISSING_BODY_OR_PHONE)

        attempts = [self.dispatcher.send_sms(to_number=n, text=message.body) for n in numbers]
        result = resolve_result(attempts)

        self.log.info(
            "sms_notification_result",
            extra={
                "extra": {
                    "event": "sms_notification_result",
                    "ok": result.ok,
                    "sent": sum(1 for a in attempts if a.ok),
                    "failed": sum(1 for a in attempts if not a.ok),
                    "dests": [dest_hint(a.number) for a in attempts],
                    "recipient_email": recipient.email or "",
                }
            },
        )
        return result


def resolve_result(attempts: Sequence[SmsAttempt]) -> NotificationResult:
    sent: List[str] = []
    failed: List[SmsAttempt] = []
    for a in attempts:
        if a.ok:
            sent.append(a.number)
        else:
            failed.append(a)

    if not sent:
        cause = failed[0].error if failed else None
        return failure(f"Could not send an SMS to {format_numbers(a.number for a in failed)}", cause=cause)
    if not failed:
        return success(f"SMS sent successfully to {format_numbers(sent)}")

    first = failed[0]
    return failure(
        f"SMS sent successfully to {format_numbers(sent)}, "
        f"but could not be sent to {format_numbers(a.number for a in failed)}"
        f" - probable cause: {first.number}: {type(first.error).__name__}: {first.error}",
        cause=first.error,
    )

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from messaging.sms import SmsClient
from ops.metrics import Timer
from utils.phone import dest_hint

log = logging.getLogger("sms.dispatcher")


@dataclass(frozen=True)
class SmsAttempt:
    number: str
    sid: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class MessageDispatcher:
    def __init__(self, sms: SmsClient):
        self.sms = sms

    def send_sms(self, to_number: str, text: str) -> SmsAttempt:
        rev = os.getenv("K_REVISION") or ""
        timer = Timer()
        log.info(
            "message_send_attempt",
            extra={"extra": {"event": "message_send_attempt", "channel": "sms", "dest": dest_hint(to_number), "revision": rev}},
        )
        try:
            sid = self.sms.send_message(to_number=to_number, text=text)
        except Exception as e:
            log.error(
                "message_send_exception",
                extra={
                    "extra": {
                        "event": "message_send_exception",
                        "channel": "sms",
                        "dest": dest_hint(to_number),
                        "error_type": type(e).__name__,
                        "message": str(e),
                        "latency_ms": timer.ms(),
                        "revision": rev,
                    }
                },
                exc_info=True,
            )
            return SmsAttempt(number=to_number, error=e)

        log.info(
            "message_send_result",
            extra={
                "extra": {
                    "event": "message_send_result",
                    "channel": "sms",
                    "dest": dest_hint(to_number),
                    "ok": True,
                    "sid": sid,
                    "latency_ms": timer.ms(),
                    "revision": rev,
                }
            },
        )
        return SmsAttempt(number=to_number, sid=sid)

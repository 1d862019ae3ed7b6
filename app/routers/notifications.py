from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.deps import get_notifier
from notification.base import Message, Notification, Recipient

router = APIRouter()


class SmsNotificationRequest(BaseModel):
    body: Optional[str] = None
    phone_numbers: List[str] = Field(default_factory=list)
    email: Optional[str] = None


@router.post("/notifications/sms")
def send_sms_notification(req: SmsNotificationRequest, notifier: Notification = Depends(get_notifier)):
    result = notifier.send_notification(
        Message(body=req.body),
        Recipient.of(req.phone_numbers, email=req.email),
    )
    return result.to_dict()

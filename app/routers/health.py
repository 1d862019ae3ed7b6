from __future__ import annotations

import os
import time
from typing import Any, Dict

from fastapi import APIRouter, Depends

from app.deps import get_notifier
from config.settings import settings
from notification.sms import SmsNotification

router = APIRouter()


@router.get("/health")
def health(notifier: SmsNotification = Depends(get_notifier)):
    payload: Dict[str, Any] = {
        "ok": True,
        "service": settings.SERVICE_NAME,
        "revision": os.getenv("K_REVISION") or "",
        "environment": settings.ENVIRONMENT,
        # Disabled SMS is a config problem, not an outage: keep ok=True and surface it.
        "sms_enabled": bool(notifier.enabled),
        "time_unix": time.time(),
    }
    if not notifier.enabled:
        payload["sms_missing"] = list(notifier.config.missing)
    return payload

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Protocol, Tuple, Union, runtime_checkable


@dataclass(frozen=True)
class Message:
    body: Optional[str] = None


def _as_numbers(numbers: Union[str, Iterable[str], None]) -> Tuple[str, ...]:
    if numbers is None:
        return ()
    if isinstance(numbers, str):
        return (numbers,)
    return tuple(numbers)


@dataclass(frozen=True)
class Recipient:
    phone_numbers: Tuple[str, ...] = ()
    email: Optional[str] = None  # reporting only

    def __post_init__(self) -> None:
        # a bare string is one number, any other iterable is a list of numbers
        object.__setattr__(self, "phone_numbers", _as_numbers(self.phone_numbers))

    @classmethod
    def single(cls, phone_number: Optional[str], email: Optional[str] = None) -> "Recipient":
        return cls(phone_numbers=(phone_number,) if phone_number is not None else (), email=email)

    @classmethod
    def of(cls, phone_numbers: Iterable[str], email: Optional[str] = None) -> "Recipient":
        return cls(phone_numbers=_as_numbers(phone_numbers), email=email)


class Status(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class NotificationResult:
    status: Status
    detail: str = ""
    cause: Optional[BaseException] = field(default=None, compare=False)

    @property
    def ok(self) -> bool:
        return self.status is Status.SUCCESS

    @property
    def is_failure(self) -> bool:
        return not self.ok

    def to_dict(self) -> Dict[str, Any]:
        cause = None
        if self.cause is not None:
            cause = f"{type(self.cause).__name__}: {self.cause}"
        return {"status": self.status.value, "ok": self.ok, "detail": self.detail, "cause": cause}


def success(detail: str) -> NotificationResult:
    return NotificationResult(status=Status.SUCCESS, detail=detail)


def failure(detail: str, cause: Optional[BaseException] = None) -> NotificationResult:
    return NotificationResult(status=Status.FAILURE, detail=detail, cause=cause)


@runtime_checkable
class Notification(Protocol):
    def send_notification(self, message: Message, recipient: Recipient) -> NotificationResult: ...


__all__ = [
    "Message",
    "Recipient",
    "Status",
    "NotificationResult",
    "Notification",
    "success",
    "failure",
]

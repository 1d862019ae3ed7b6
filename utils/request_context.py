from __future__ import annotations

from contextvars import ContextVar, Token

_request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def set_request_id(rid: str) -> Token:
    return _request_id_var.set(rid or "")


def get_request_id() -> str:
    return _request_id_var.get() or ""


def clear_request_id(token: Token) -> None:
    # restores whatever was set before the matching set_request_id
    _request_id_var.reset(token)

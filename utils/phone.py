from __future__ import annotations

from typing import Iterable, List, Optional


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def usable_numbers(numbers: Iterable[Optional[str]]) -> List[str]:
    # Non-blank numbers, stripped, input order kept (duplicates included).
    return [str(n).strip() for n in (numbers or ()) if not is_blank(n)]


def dest_hint(v: Optional[str], keep: int = 4) -> str:
    # Log-safe destination: only the last `keep` characters.
    v = (v or "").strip()
    if not v:
        return ""
    if len(v) <= keep:
        return v
    return f"...{v[-keep:]}"


def format_numbers(numbers: Iterable[str]) -> str:
    return "[" + ", ".join(numbers) + "]"

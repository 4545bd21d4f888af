# recipe_keeper/services/clock.py
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], str]


def utc_now_iso() -> str:
    """Timestamp ISO-8601 em UTC com milissegundos, ex.: 2024-05-01T12:30:00.123Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

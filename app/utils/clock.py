# app/utils/clock.py

import threading
from datetime import datetime, timedelta, timezone

_lock = threading.Lock()
_last_tick = datetime.min


def utcnow() -> datetime:
    """UTC sem tzinfo, estritamente crescente dentro do processo."""
    global _last_tick
    with _lock:
        now = datetime.now(timezone.utc).replace(tzinfo=None)
        if now <= _last_tick:
            now = _last_tick + timedelta(microseconds=1)
        _last_tick = now
        return now

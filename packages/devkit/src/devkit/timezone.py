from __future__ import annotations

from datetime import datetime
import os
import time
from zoneinfo import ZoneInfo

UK_ZONE = ZoneInfo("Europe/London")

_configured = False


def configure_uk_timezone() -> None:
    global _configured
    if _configured:
        return
    os.environ["TZ"] = "Europe/London"
    if hasattr(time, "tzset"):
        time.tzset()
    _configured = True


def now_uk() -> datetime:
    return datetime.now(UK_ZONE)


def now_uk_iso() -> str:
    return now_uk().isoformat()

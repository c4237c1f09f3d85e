from typing import Any

from pydantic import BaseModel


class WaitlistSignupRequest(BaseModel):
    # Any JSON value; the service rejects non-string emails.
    email: Any = None
    source: str | None = None

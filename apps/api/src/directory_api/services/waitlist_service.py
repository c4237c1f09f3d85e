from __future__ import annotations

import logging
import re
from typing import Any

from devkit.timezone import now_uk_iso

from directory_api.repositories.base import DuplicateSignupError, WaitlistRepository

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DEFAULT_SOURCE = "community_page"


class InvalidEmailError(ValueError):
    pass


class WaitlistUnavailableError(RuntimeError):
    pass


class WaitlistSignupFailed(RuntimeError):
    pass


def normalize_email(email: object) -> str | None:
    """Validated email as stored (lowercased, trimmed), or ``None``.

    The pattern is checked against the value as submitted, so padded input
    is rejected rather than silently trimmed.
    """
    if not isinstance(email, str) or not EMAIL_PATTERN.fullmatch(email):
        return None
    return email.lower().strip()


class WaitlistService:
    def __init__(self, repository: WaitlistRepository | None) -> None:
        self._repository = repository

    @property
    def configured(self) -> bool:
        return self._repository is not None

    async def signup(self, *, email: object, source: str | None, user_agent: str | None) -> dict[str, Any]:
        """Store one signup and return the saved row.

        Raises ``InvalidEmailError``, ``WaitlistUnavailableError`` when no store
        is configured, ``DuplicateSignupError`` or ``WaitlistSignupFailed``.
        """
        normalized = normalize_email(email)
        if normalized is None:
            raise InvalidEmailError("Valid email address is required")
        if self._repository is None:
            logger.error("waitlist_store_not_configured", extra={"component": "waitlist"})
            raise WaitlistUnavailableError("Service temporarily unavailable")

        metadata = {"user_agent": user_agent, "timestamp": now_uk_iso()}
        try:
            row = await self._repository.add_signup(
                email=normalized,
                source=source or DEFAULT_SOURCE,
                metadata=metadata,
            )
        except DuplicateSignupError:
            logger.info("waitlist_signup_duplicate", extra={"component": "waitlist"})
            raise
        except Exception as exc:
            logger.exception("waitlist_signup_failed", extra={"component": "waitlist"})
            raise WaitlistSignupFailed("Failed to add email to waitlist") from exc

        logger.info("waitlist_signup_saved", extra={"component": "waitlist", "source": source or DEFAULT_SOURCE})
        return row

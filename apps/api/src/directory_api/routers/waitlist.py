from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from directory_api.dependencies import get_waitlist_service
from directory_api.errors import ApiError
from directory_api.repositories.base import DuplicateSignupError
from directory_api.response import success_response
from directory_api.schemas.waitlist import WaitlistSignupRequest
from directory_api.services.waitlist_service import (
    InvalidEmailError,
    WaitlistService,
    WaitlistSignupFailed,
    WaitlistUnavailableError,
)

router = APIRouter(prefix="/api/waitlist", tags=["waitlist"])


@router.post("")
async def join_waitlist(
    body: WaitlistSignupRequest,
    request: Request,
    service: WaitlistService = Depends(get_waitlist_service),
) -> dict:
    try:
        row = await service.signup(
            email=body.email,
            source=body.source,
            user_agent=request.headers.get("user-agent"),
        )
    except InvalidEmailError as exc:
        raise ApiError("INVALID_EMAIL", str(exc), 400) from exc
    except WaitlistUnavailableError as exc:
        raise ApiError("SERVICE_UNAVAILABLE", str(exc), 503) from exc
    except DuplicateSignupError as exc:
        raise ApiError("ALREADY_ON_WAITLIST", "This email is already on our waitlist!", 409) from exc
    except WaitlistSignupFailed as exc:
        raise ApiError("WAITLIST_FAILURE", str(exc), 500) from exc
    return success_response(row, meta={}, message="Successfully added to waitlist")

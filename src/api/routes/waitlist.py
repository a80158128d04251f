import json

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.dependencies import get_notifier, get_waitlist_store
from src.api.services.waitlist import METHOD_NOT_ALLOWED, process_signup
from src.config.settings import settings
from src.schemas.waitlist import WaitlistErrorResponse, WaitlistJoinResponse

router = APIRouter(
    prefix="/api/waitlist",
    tags=["waitlist"],
    responses={
        400: {
            "model": WaitlistErrorResponse,
            "description": "Missing or invalid email",
            "content": {
                "application/json": {
                    "examples": {
                        "missing": {"value": {"success": False, "error": "Email is required"}},
                        "invalid": {"value": {"success": False, "error": "Invalid email format"}}
                    }
                }
            }
        },
        500: {
            "model": WaitlistErrorResponse,
            "description": "Server-side failure",
            "content": {
                "application/json": {
                    "examples": {
                        "database": {"value": {"success": False, "error": "Database error. Please try again."}},
                        "unexpected": {"value": {"success": False, "error": "An unexpected error occurred"}}
                    }
                }
            }
        }
    }
)

@router.post(
    "",
    response_model=WaitlistJoinResponse,
    response_model_exclude_none=True,
    responses={
        200: {
            "description": "Waitlist response",
            "content": {
                "application/json": {
                    "examples": {
                        "new_entry": {
                            "value": {"success": True, "message": "Successfully joined the waitlist!"}
                        },
                        "existing": {
                            "value": {
                                "success": True,
                                "alreadyRegistered": True,
                                "message": "This email is already on the waitlist"
                            }
                        }
                    }
                }
            }
        }
    }
)
async def join_waitlist(
    request: Request,
    store=Depends(get_waitlist_store),
    notifier=Depends(get_notifier)
) -> JSONResponse:
    """
    Add an email to the waitlist.

    Expects a JSON body `{"email": "..."}`. Signing up twice with the same
    address is not an error: the second call reports `alreadyRegistered`.
    A welcome email is sent on the first signup only.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = None

    result = await run_in_threadpool(
        process_signup, payload, store, notifier, settings.WAITLIST_SOURCE
    )
    return JSONResponse(status_code=result.status_code, content=result.body)

async def waitlist_method_not_allowed(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Answer any non-POST method on the waitlist endpoint with a fixed 405 body"""
    if exc.status_code == 405 and request.url.path.rstrip("/") == router.prefix:
        return JSONResponse(status_code=405, content={"error": METHOD_NOT_ALLOWED}, headers=exc.headers)
    return await http_exception_handler(request, exc)

"""Maps Result failures and domain exceptions onto HTTP responses."""
from __future__ import annotations
import logging

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from wordquiz.domain.common.errors import InvalidInput
from wordquiz.domain.common.result import CONFLICT, NOT_FOUND, UNAVAILABLE, Result

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    NOT_FOUND: 404,
    CONFLICT: 409,
    f"{UNAVAILABLE}:configuration": 500,
    f"{UNAVAILABLE}:format": 502,
    f"{UNAVAILABLE}:upstream": 503,
}


def raise_for_result(result: Result) -> None:
    if not result.is_success:
        raise HTTPException(status_code=_STATUS_BY_CODE.get(result.code, 400), detail=result.error)


async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    logger.warning("Invalid input on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})

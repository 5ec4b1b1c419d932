"""Response envelope shared by every /api route.

    {"code": 0, "message": "success", "data": {...},
     "timestamp": "<ISO-8601 UTC>", "request_id": "req_..."}

Errors carry the AppError code and message with data=null.
"""

import uuid
from typing import Any

from pydantic import BaseModel, Field

from src.lp_common.datetime_utils import utc_now
from src.lp_common.errors import AppError


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    data: Any = None
    timestamp: str = Field(default_factory=lambda: utc_now().isoformat())
    request_id: str = Field(default_factory=new_request_id)


def success_response(data: Any = None, request_id: str | None = None) -> ApiResponse:
    if request_id is None:
        return ApiResponse(data=data)
    return ApiResponse(data=data, request_id=request_id)


def error_response(exc: AppError, request_id: str | None = None) -> ApiResponse:
    if request_id is None:
        return ApiResponse(code=exc.code, message=exc.message)
    return ApiResponse(code=exc.code, message=exc.message, request_id=request_id)

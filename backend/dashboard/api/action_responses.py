"""Action Responses — maps ActionResult values onto HTTP responses.

Invariants:
    - Redirect -> 303 See Other with Location set to the target view path
    - FormErrors -> 422 with {"errors": {...}, "message": ...}
    - ActionMessage -> route-chosen failure status with {"message": ...}
    - None -> 204 No Content
"""

from fastapi import Response, status
from fastapi.responses import JSONResponse, RedirectResponse

from dashboard.core.action_results import (
    ActionMessage, ActionResult, FormErrors, Redirect,
)


def to_http_response(
    result: ActionResult, failure_status: int = status.HTTP_400_BAD_REQUEST,
) -> Response:
    if isinstance(result, Redirect):
        return RedirectResponse(
            result.path, status_code=status.HTTP_303_SEE_OTHER,
        )
    if isinstance(result, FormErrors):
        return JSONResponse(
            status_code=422,
            content=result.to_response(),
        )
    if isinstance(result, ActionMessage):
        return JSONResponse(
            status_code=failure_status, content=result.to_response(),
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

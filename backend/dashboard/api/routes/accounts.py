"""Account Routes — registration and credential sign-in form posts.

Invariants:
    - Successful registration answers 303 -> /login
    - Successful sign-in answers 204; session issuance is not handled here
    - Errors raised by the auth gateway reach the global error handlers untouched
"""


from fastapi import APIRouter, Depends, Request, status

from dashboard.api.action_responses import to_http_response
from dashboard.api.deps import get_account_handlers
from dashboard.services.handle_accounts import AccountHandlers

router = APIRouter(prefix="/api/v1", tags=["accounts"])


@router.post("/register")
async def register(
    request: Request,
    handlers: AccountHandlers = Depends(get_account_handlers),
):
    form = await request.form()
    result = await handlers.register(form)
    return to_http_response(result, failure_status=status.HTTP_400_BAD_REQUEST)


@router.post("/login")
async def login(
    request: Request,
    handlers: AccountHandlers = Depends(get_account_handlers),
):
    form = await request.form()
    result = await handlers.authenticate(form)
    return to_http_response(result, failure_status=status.HTTP_401_UNAUTHORIZED)

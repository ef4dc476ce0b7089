"""Account Handlers — register, authenticate.

Invariants:
    - register hashes and inserts only after the form validated AND passwords match
    - The users table never receives the plaintext password
    - register redirects to the login view only after the insert committed
    - authenticate maps AuthFailure(CredentialsSignin) -> "Invalid Credentials.",
      every other AuthFailure -> "Something went wrong."
    - authenticate lets any exception raised by the auth gateway propagate

Design Decisions:
    - Password mismatch returns ActionMessage like every other failure, so
      callers handle one result type across all actions
    - Sign-in delegated entirely to AuthGateway: this layer never reads users
"""

import logging
from typing import Any, Callable, Mapping
from uuid import uuid4

from dashboard.core.action_results import (
    ActionMessage, ActionResult, FormErrors, Redirect,
)
from dashboard.core.domain_types import (
    CREDENTIALS_PROVIDER, LOGIN_VIEW_PATH, AuthErrorType, UserId,
)
from dashboard.core.errors import DatabaseError
from dashboard.core.form_schemas import RegistrationForm, validate_form
from dashboard.core.gateway_protocols import (
    AuthFailure, AuthGateway, PasswordHasher, SignedIn, SqlGateway,
)

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing Fields. Failed to Create Accout."
PASSWORD_MISMATCH_MESSAGE = "Passwords don't match."
CREATE_ACCOUNT_FAILED_MESSAGE = "Database Error: Failed to Create Account."
INVALID_CREDENTIALS_MESSAGE = "Invalid Credentials."
GENERIC_AUTH_MESSAGE = "Something went wrong."

INSERT_USER = (
    "INSERT INTO users (id, name, email, password) "
    "VALUES (:id, :name, :email, :password)"
)


class AccountHandlers:
    """Registration and sign-in actions."""

    def __init__(
        self,
        db: SqlGateway,
        auth: AuthGateway,
        hasher: PasswordHasher,
        new_id: Callable[[], str] = lambda: str(uuid4()),
    ):
        self.db = db
        self.auth = auth
        self.hasher = hasher
        self.new_id = new_id

    async def register(
        self, form: Mapping[str, Any], prev_state: ActionResult = None,
    ) -> ActionResult:
        """Create a user account, then send the caller to the login view."""
        validated = validate_form(RegistrationForm, {
            "name": form.get("name"),
            "email": form.get("email"),
            "password": form.get("password"),
            "confirmPassword": form.get("confirm-password"),
        }, MISSING_FIELDS_MESSAGE)
        if isinstance(validated, FormErrors):
            return validated

        if validated.password != validated.confirm_password:
            return ActionMessage(PASSWORD_MISMATCH_MESSAGE)

        hashed_password = await self.hasher.hash(validated.password)
        user_id = UserId(self.new_id())

        try:
            await self.db.execute(INSERT_USER, {
                "id": user_id,
                "name": validated.name,
                "email": validated.email,
                "password": hashed_password,
            })
        except DatabaseError as e:
            logger.warning(
                f"User insert failed: {e.message}",
                extra={"action": "register", "error_code": e.code},
            )
            return ActionMessage(CREATE_ACCOUNT_FAILED_MESSAGE)

        logger.info("User registered", extra={"action": "register"})
        return Redirect(LOGIN_VIEW_PATH)

    async def authenticate(
        self, form: Mapping[str, Any], prev_state: ActionResult = None,
    ) -> ActionResult:
        """Sign in with the credentials provider. None on success."""
        result = await self.auth.sign_in(CREDENTIALS_PROVIDER, form)
        if isinstance(result, SignedIn):
            return None
        if isinstance(result, AuthFailure):
            logger.info(
                f"Sign-in rejected: {result.type.value}",
                extra={"action": "authenticate", "error_code": result.type.value},
            )
            if result.type is AuthErrorType.CREDENTIALS_SIGNIN:
                return ActionMessage(INVALID_CREDENTIALS_MESSAGE)
            return ActionMessage(GENERIC_AUTH_MESSAGE)
        raise TypeError(f"Unexpected sign-in result: {result!r}")

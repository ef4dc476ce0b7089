"""Credentials Auth Gateway — email + password sign-in against the users table.

Invariants:
    - Only the "credentials" provider is supported; others -> AuthFailure(Configuration)
    - Malformed credentials, unknown email and wrong password all yield
      AuthFailure(CredentialsSignin) — callers cannot tell which one happened
    - A failed user lookup yields AuthFailure(CallbackRouteError), logged here
    - Never raises for credential problems

Design Decisions:
    - Lookup through SqlGateway.fetch_one: same gateway contract the form
      actions use, so tests fake one collaborator
    - Session establishment happens in the caller once SignedIn is returned
"""

import logging
from typing import Any, Mapping

from dashboard.core.domain_types import (
    CREDENTIALS_PROVIDER, AuthErrorType, UserId,
)
from dashboard.core.errors import DatabaseError
from dashboard.core.form_schemas import LoginCredentials, validate_form
from dashboard.core.gateway_protocols import (
    AuthFailure, PasswordHasher, SignedIn, SignInResult, SqlGateway,
)

logger = logging.getLogger(__name__)

SELECT_USER_BY_EMAIL = (
    "SELECT id, email, password FROM users WHERE email = :email"
)


class CredentialsAuthGateway:
    """AuthGateway that verifies bcrypt hashes stored in the users table."""

    def __init__(self, db: SqlGateway, hasher: PasswordHasher):
        self.db = db
        self.hasher = hasher

    async def sign_in(
        self, provider: str, form: Mapping[str, Any],
    ) -> SignInResult:
        if provider != CREDENTIALS_PROVIDER:
            logger.error(f"Unsupported sign-in provider: {provider}")
            return AuthFailure(AuthErrorType.CONFIGURATION)

        credentials = validate_form(LoginCredentials, {
            "email": form.get("email"),
            "password": form.get("password"),
        }, "Invalid credentials.")
        if not isinstance(credentials, LoginCredentials):
            return AuthFailure(AuthErrorType.CREDENTIALS_SIGNIN)

        try:
            user = await self.db.fetch_one(
                SELECT_USER_BY_EMAIL, {"email": credentials.email},
            )
        except DatabaseError as e:
            logger.error(
                f"User lookup failed: {e.message}",
                extra={"action": "sign_in", "error_code": e.code},
            )
            return AuthFailure(AuthErrorType.CALLBACK_ROUTE_ERROR)

        if user is None:
            return AuthFailure(AuthErrorType.CREDENTIALS_SIGNIN)
        if not await self.hasher.verify(credentials.password, user["password"]):
            return AuthFailure(AuthErrorType.CREDENTIALS_SIGNIN)

        return SignedIn(user_id=UserId(str(user["id"])), email=user["email"])

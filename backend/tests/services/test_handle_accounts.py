"""Account Handlers — register and authenticate against fake collaborators.

Tests cover:
    - Missing registration fields -> FormErrors keyed by field
    - Password mismatch never hashes or inserts
    - Successful registration stores a hash (not the plaintext) and redirects to /login
    - Database failure -> fixed message, no redirect
    - authenticate maps AuthFailure types and re-raises foreign exceptions
"""

import pytest

from dashboard.core.action_results import ActionMessage, FormErrors, Redirect
from dashboard.core.domain_types import AuthErrorType, UserId
from dashboard.core.errors import DatabaseError
from dashboard.core.gateway_protocols import AuthFailure, SignedIn
from tests.services.fakes import FakeAuthGateway, FakeSqlGateway

REGISTRATION = {
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "password": "analytical",
    "confirm-password": "analytical",
}


# ─── register ────────────────────────────────────────────────────

async def test_register_inserts_hashed_password_and_redirects(
    make_account_handlers, fake_db, hasher,
):
    result = await make_account_handlers().register(REGISTRATION)

    assert result == Redirect("/login")
    [(statement, params)] = fake_db.executed
    assert statement.startswith("INSERT INTO users")
    assert params["id"] == "user-1"
    assert params["name"] == "Ada Lovelace"
    assert params["email"] == "ada@example.com"
    assert params["password"] != "analytical"
    assert hasher.hashed == ["analytical"]


async def test_register_password_mismatch_never_hashes_or_inserts(
    make_account_handlers, fake_db, hasher,
):
    result = await make_account_handlers().register(
        {**REGISTRATION, "confirm-password": "analytica1"},
    )

    assert result == ActionMessage("Passwords don't match.")
    assert hasher.hashed == []
    assert fake_db.executed == []


async def test_register_missing_fields_reports_each_field(
    make_account_handlers, fake_db, hasher,
):
    result = await make_account_handlers().register({"name": "Ada"})

    assert result == FormErrors(
        errors={
            "email": ["Please enter an email address."],
            "password": ["Please enter a password."],
            "confirmPassword": ["Please confirm your password."],
        },
        message="Missing Fields. Failed to Create Accout.",
    )
    assert hasher.hashed == []
    assert fake_db.executed == []


async def test_register_reads_confirmation_from_hyphenated_form_key(
    make_account_handlers,
):
    form = {k: v for k, v in REGISTRATION.items() if k != "confirm-password"}
    form["confirmPassword"] = "analytical"

    result = await make_account_handlers().register(form)

    assert isinstance(result, FormErrors)
    assert list(result.errors) == ["confirmPassword"]


async def test_register_database_failure_returns_message(make_account_handlers):
    handlers = make_account_handlers(db=FakeSqlGateway(fail=True))

    result = await handlers.register(REGISTRATION)

    assert result == ActionMessage("Database Error: Failed to Create Account.")


# ─── authenticate ────────────────────────────────────────────────

async def test_authenticate_success_returns_none(make_account_handlers):
    auth = FakeAuthGateway(result=SignedIn(UserId("user-1"), "ada@example.com"))

    result = await make_account_handlers(auth=auth).authenticate(
        {"email": "ada@example.com", "password": "analytical"},
    )

    assert result is None
    assert auth.calls == [
        ("credentials", {"email": "ada@example.com", "password": "analytical"}),
    ]


async def test_authenticate_credentials_signin_is_invalid_credentials(
    make_account_handlers,
):
    auth = FakeAuthGateway(result=AuthFailure(AuthErrorType.CREDENTIALS_SIGNIN))

    result = await make_account_handlers(auth=auth).authenticate({})

    assert result == ActionMessage("Invalid Credentials.")


@pytest.mark.parametrize("error_type", [
    AuthErrorType.CALLBACK_ROUTE_ERROR,
    AuthErrorType.ACCESS_DENIED,
    AuthErrorType.CONFIGURATION,
])
async def test_authenticate_other_failures_are_generic(
    make_account_handlers, error_type,
):
    auth = FakeAuthGateway(result=AuthFailure(error_type))

    result = await make_account_handlers(auth=auth).authenticate({})

    assert result == ActionMessage("Something went wrong.")


@pytest.mark.parametrize("error", [
    RuntimeError("navigation signal"),
    DatabaseError("pool exhausted", "execute"),
])
async def test_authenticate_reraises_non_auth_errors(
    make_account_handlers, error,
):
    auth = FakeAuthGateway(error=error)

    with pytest.raises(type(error)) as exc_info:
        await make_account_handlers(auth=auth).authenticate({})

    assert exc_info.value is error

"""Boundary Protocols — contracts between the form actions and their collaborators.

Invariants:
    - Core NEVER imports from the shell — dependency arrows point inward only
    - Every IO collaborator (SQL, sign-in, hashing, cache) is a Protocol
    - SqlGateway raises DatabaseError for any failure; callers never see driver errors
    - AuthGateway reports credential problems as AuthFailure values, never raises
      for them; anything it raises is a condition the caller must not swallow

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async methods: implementations do IO (or CPU-heavy hashing off-thread),
      so every call is a suspension point for the handler
    - SignInResult is a closed union: handlers branch on isinstance and on the
      AuthErrorType discriminant, no exception-type switch
"""

from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from dashboard.core.domain_types import AuthErrorType, UserId


@dataclass(frozen=True)
class SignedIn:
    """Credentials accepted — the session is established outside this layer."""
    user_id: UserId
    email: str


@dataclass(frozen=True)
class AuthFailure:
    """Sign-in rejected; `type` tells the caller which message to show."""
    type: AuthErrorType


SignInResult = SignedIn | AuthFailure


class SqlGateway(Protocol):
    """Parameterized statement execution — implemented by the shell."""
    async def execute(
        self, statement: str, params: Mapping[str, Any],
    ) -> int: ...
    async def fetch_one(
        self, statement: str, params: Mapping[str, Any],
    ) -> dict | None: ...


class AuthGateway(Protocol):
    """Credential sign-in — implemented by the shell."""
    async def sign_in(
        self, provider: str, form: Mapping[str, Any],
    ) -> SignInResult: ...


class PasswordHasher(Protocol):
    """One-way salted password derivation."""
    async def hash(self, password: str) -> str: ...
    async def verify(self, password: str, hashed: str) -> bool: ...


class Revalidator(Protocol):
    """Marks cached representations of a view path stale."""
    async def revalidate(self, path: str) -> None: ...

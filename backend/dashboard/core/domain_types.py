"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, InvoiceId, CustomerId wrap str UUIDs — never pass anonymous strings
    - All valid states encoded as Enums — no raw string matching
    - View paths declared once here and referenced by handlers and routes

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and bind to SQL parameters without converters
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
InvoiceId = NewType("InvoiceId", str)
CustomerId = NewType("CustomerId", str)


# ─── Value Types ─────────────────────────────────────────────────

AmountInCents = NewType("AmountInCents", int)   # minor currency units


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice payment states — maps to the `status` column."""
    PENDING = "pending"
    PAID = "paid"


class AuthErrorType(str, Enum):
    """Discriminant of an authentication failure reported by the auth gateway."""
    CREDENTIALS_SIGNIN = "CredentialsSignin"
    CALLBACK_ROUTE_ERROR = "CallbackRouteError"
    ACCESS_DENIED = "AccessDenied"
    CONFIGURATION = "Configuration"


# ─── View Paths ──────────────────────────────────────────────────

INVOICES_VIEW_PATH = "/dashboard/invoices"
LOGIN_VIEW_PATH = "/login"

CREDENTIALS_PROVIDER = "credentials"

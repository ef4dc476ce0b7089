"""Dependencies — builds form action handlers with their collaborators per request.

Invariants:
    - Handlers never construct their own gateways: everything is injected here
    - One ViewCache per process, shared by the actions (writes) and list routes (reads)

Design Decisions:
    - Plain FastAPI Depends chain: tests swap any layer via dependency_overrides
"""

from fastapi import Depends

from dashboard.config import get_settings
from dashboard.core.gateway_protocols import PasswordHasher, SqlGateway
from dashboard.infrastructure.credentials_auth import CredentialsAuthGateway
from dashboard.infrastructure.database import (
    DatabaseSessionManager, SqlAlchemyGateway, get_db_manager,
)
from dashboard.infrastructure.password_hashing import BcryptHasher
from dashboard.infrastructure.view_cache import ViewCache
from dashboard.services.handle_accounts import AccountHandlers
from dashboard.services.handle_invoices import InvoiceHandlers

_view_cache = ViewCache()


def get_view_cache() -> ViewCache:
    return _view_cache


def get_sql_gateway(
    manager: DatabaseSessionManager = Depends(get_db_manager),
) -> SqlGateway:
    return SqlAlchemyGateway(manager)


def get_password_hasher() -> PasswordHasher:
    return BcryptHasher(rounds=get_settings().bcrypt_rounds)


def get_invoice_handlers(
    db: SqlGateway = Depends(get_sql_gateway),
    cache: ViewCache = Depends(get_view_cache),
) -> InvoiceHandlers:
    return InvoiceHandlers(db, cache)


def get_account_handlers(
    db: SqlGateway = Depends(get_sql_gateway),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AccountHandlers:
    return AccountHandlers(db, CredentialsAuthGateway(db, hasher), hasher)

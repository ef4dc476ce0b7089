"""Handler test fixtures — fakes wired into InvoiceHandlers / AccountHandlers.

Invariants:
    - No database, no bcrypt: handlers only see the fakes from tests.services.fakes
    - Clock and id factory pinned so persisted params are exact
"""

import pytest

from dashboard.services.handle_accounts import AccountHandlers
from dashboard.services.handle_invoices import InvoiceHandlers
from tests.services.fakes import (
    FIXED_TODAY, FakeAuthGateway, FakeHasher, FakeRevalidator, FakeSqlGateway,
)


@pytest.fixture
def fake_db():
    return FakeSqlGateway()


@pytest.fixture
def failing_db():
    return FakeSqlGateway(fail=True)


@pytest.fixture
def revalidator():
    return FakeRevalidator()


@pytest.fixture
def hasher():
    return FakeHasher()


@pytest.fixture
def invoice_handlers(fake_db, revalidator):
    return InvoiceHandlers(
        fake_db, revalidator,
        new_id=lambda: "inv-new", today=lambda: FIXED_TODAY,
    )


@pytest.fixture
def failing_invoice_handlers(failing_db, revalidator):
    return InvoiceHandlers(
        failing_db, revalidator,
        new_id=lambda: "inv-new", today=lambda: FIXED_TODAY,
    )


@pytest.fixture
def make_account_handlers(fake_db, hasher):
    """Factory: account handlers with a configurable auth gateway / db."""
    def _make(auth=None, db=None):
        return AccountHandlers(
            db or fake_db, auth or FakeAuthGateway(), hasher,
            new_id=lambda: "user-1",
        )
    return _make

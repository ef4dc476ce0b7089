"""ORM Models — read-side mapping of the users and invoices tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Form actions never use these models; they write through SqlGateway

Design Decisions:
    - Models exist for the invoices listing and for create_all in tests;
      the production schema is owned by the database, not by this package
"""

from dashboard.models.user import User  # noqa: F401
from dashboard.models.invoice import Invoice  # noqa: F401

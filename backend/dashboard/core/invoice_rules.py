"""Invoice Rules — amount conversion for persistence.

Invariants:
    - Persisted amounts are integer minor units: round(amount * 100)
    - The major-unit amount from the form is never persisted directly
    - Accepted amounts convert to at least 1 cent and fit the 32-bit amount column
"""

from dashboard.core.domain_types import AmountInCents

MIN_AMOUNT_IN_CENTS = AmountInCents(1)
MAX_AMOUNT_IN_CENTS = AmountInCents(2**31 - 1)
MAX_AMOUNT = MAX_AMOUNT_IN_CENTS / 100   # 21_474_836.47


def to_minor_units(amount: float) -> AmountInCents:
    """19.99 -> 1999. Rounds away float artefacts such as 1998.9999999999998."""
    return AmountInCents(round(amount * 100))

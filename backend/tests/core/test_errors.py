"""Errors — DatabaseError envelope and classification.

Tests cover:
    - DatabaseError is a critical database error answering 503
    - to_response() carries code, message, category, severity and an ISO timestamp
"""

from datetime import datetime

from dashboard.core.errors import (
    DashboardError, DatabaseError, ErrorCategory, ErrorSeverity,
)


def test_database_error_classification():
    exc = DatabaseError("Connection or operational error", "execute")

    assert isinstance(exc, DashboardError)
    assert exc.code == "DATABASE_ERROR"
    assert exc.category is ErrorCategory.DATABASE
    assert exc.severity is ErrorSeverity.CRITICAL
    assert exc.http_status == 503
    assert exc.operation == "execute"


def test_database_error_response_envelope():
    body = DatabaseError("Integrity constraint violated", "commit").to_response()

    error = body["error"]
    assert set(error) == {"code", "message", "category", "severity", "timestamp"}
    assert error["message"] == "Database commit failed: Integrity constraint violated"
    assert error["category"] == "database"
    assert error["severity"] == "critical"
    assert datetime.fromisoformat(error["timestamp"]).tzinfo is not None

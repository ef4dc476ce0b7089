"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes translate ActionResult values into HTTP responses, nothing more

Design Decisions:
    - Thin routes delegate to services handlers built in deps.py
"""

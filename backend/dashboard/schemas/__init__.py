"""Pydantic Schemas — response envelopes for API endpoints.

Invariants:
    - Form input is validated by core/form_schemas.py, not here
    - Schemas here only shape data leaving the API

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""

"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Form validation and amount conversion are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: handlers in services/
      orchestrate the gateway calls around the pure pieces defined here
"""

"""Services Layer — form action handlers.

Invariants:
    - One handler class per resource, collaborators injected via __init__
    - Handlers orchestrate: validate (core) -> one gateway call -> outcome

Design Decisions:
    - One handler file per resource for locality
"""

"""Infrastructure Layer — concrete gateways and cross-cutting concerns.

Invariants:
    - Infrastructure implements the Protocols in core/gateway_protocols.py
    - Driver/library exceptions are mapped to core errors at this boundary

Design Decisions:
    - Thin adapters over SQLAlchemy and bcrypt, injected into handlers by api/deps.py
"""

"""Infrastructure Layer — data loading, time source and cross-cutting concerns.

Invariants:
    - Infrastructure implements core Protocols; it never calls the parser itself
    - Failures to load external data are mapped to DivisionDataError

Design Decisions:
    - Concrete adapters here, Protocol contracts in core/boundary_protocols.py
"""

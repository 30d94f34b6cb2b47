"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Domain values converted with from_domain() classmethods, never by routes

Design Decisions:
    - Separate from core types: schemas are API contracts, core types are domain values
"""

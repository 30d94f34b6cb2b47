"""Core Layer — pure parsing logic, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic ("today" is always a parameter)

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""

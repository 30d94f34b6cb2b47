"""Service Layer — orchestrates the pure parser with registry, clock and logging.

Invariants:
    - Services own all logging around parsing; core stays silent
    - Raw identity numbers never appear in log records

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""

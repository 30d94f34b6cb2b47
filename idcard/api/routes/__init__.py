"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain parsing logic (delegate to the service)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""

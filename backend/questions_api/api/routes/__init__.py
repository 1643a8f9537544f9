"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with tags
    - Paths not declared here fall through to FastAPI's default 404/405
"""

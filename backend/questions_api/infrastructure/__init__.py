"""Infrastructure Layer — providers and cross-cutting transport concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Providers satisfy core.repository_protocols contracts structurally
"""

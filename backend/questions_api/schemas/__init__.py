"""Pydantic Schemas — response shapes for API endpoints.

Invariants:
    - Schemas describe the wire format; domain types stay in core/

Design Decisions:
    - Separate from core: schemas are API contracts, dataclasses are the domain
"""

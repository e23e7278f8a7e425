"""Pydantic Schemas — request/query validation contracts for every entity kind.

Invariants:
    - Schemas validate at the system boundary (request bodies, query strings)
    - Wire names are camelCase aliases; Python attribute names are snake_case
    - Schemas are immutable (frozen) and defined once at import time

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Update schemas are derived from create schemas (make_partial), never hand-copied
"""

"""Core Layer — pure validation, normalization and codec logic. No IO, no async, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic (sentiment, filters, codec, validator)

Design Decisions:
    - Functional core separated from imperative shell: routes and stores orchestrate IO
      around these functions
"""

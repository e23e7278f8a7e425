"""API Layer — FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; every failure uses the NestwellError envelope
"""

"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes validate through the injected Validator and persist through a store
      Protocol; no SQL in route modules
"""

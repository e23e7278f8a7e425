"""Infrastructure — imperative shell: database sessions, SQL stores, logging.

Invariants:
    - Everything that performs IO lives here or in api/
    - Stores implement the Protocols in core/repository_protocols.py
"""

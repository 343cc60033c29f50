"""Service Layer — contact read operations over an AsyncSession.

Invariants:
    - Services receive the session from the caller, never open their own
"""

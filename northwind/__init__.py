"""Northwind Contacts Package — contact data access with an append-only SQL trace log.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""

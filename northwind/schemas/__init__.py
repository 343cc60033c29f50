"""Pydantic Schemas — validation and read models for contacts.

Invariants:
    - Schemas validate at the system boundary (user input, JSON output)

Design Decisions:
    - Separate from models: schemas are contracts, models are persistence
"""

"""Infrastructure Layer — database access, file sinks and logging setup.

Invariants:
    - Infrastructure never imports from services/
    - IO failures mapped to typed errors from core/errors.py

Design Decisions:
    - The SQL trace file logger lives here: it is a sink the database layer writes to,
      not part of the stdlib logging tree
"""

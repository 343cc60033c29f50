"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - All sessions are async (AsyncSession), created by infrastructure/database.py

Design Decisions:
    - aiosqlite driver for local development (native async, no server required)
"""

"""Core Layer — error hierarchy shared by every other layer.

Invariants:
    - No module in core/ imports from services/, infrastructure/, or db/
"""

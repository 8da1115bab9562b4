"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Date math (countdown, duration) is deterministic: "now" is always a parameter
"""

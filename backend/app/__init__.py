"""Jana Application Package — countdown, timeline, gallery and notes behind a passkey.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

"""Services Layer — persistence (Storage) and the local image upload store.

Invariants:
    - Services take their IO handles (AsyncSession, upload root) in the constructor
"""

"""Infrastructure Layer — database engine/sessions and logging setup.

Invariants:
    - Infrastructure never imports domain logic from core/ (errors excepted)
"""

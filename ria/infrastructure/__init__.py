"""Infrastructure Layer: database sessions and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ game logic (errors excepted)
"""

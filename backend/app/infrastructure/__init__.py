"""Infrastructure Layer — clock and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic
"""

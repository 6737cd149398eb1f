"""Services Layer — imperative shell around the core pipeline.

Invariants:
    - Services own IO concerns (clock, logging); core stays pure
"""

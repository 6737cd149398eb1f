"""Core Layer — pure instruction pipeline, no IO, no async, no clock.

Invariants:
    - No module in core/ imports from services/, api/, schemas/, or infrastructure/
    - All functions are pure and deterministic, except ledger.apply_transfer,
      which mutates the two per-request Account records it is given

Design Decisions:
    - Functional core separated from imperative shell
"""

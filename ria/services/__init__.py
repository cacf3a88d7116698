"""Services Layer: imperative shell around the pure game core.

Invariants:
    - Services own all IO (preference reads/writes); core/ stays pure
"""

"""Ria Application Package: sequence rule guessing game service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

"""Store API - users and products over an async relational store.

Invariants:
    - Package root contains no executable code (no import side effects)
"""

"""Core Layer - domain types, errors, ordering rules and gateway protocols.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
    - No IO: everything here is pure or a Protocol declaration
"""

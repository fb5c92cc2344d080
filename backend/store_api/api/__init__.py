"""API Layer - FastAPI routers, dependencies and error handlers.

Invariants:
    - Routers registered explicitly in main.py (no auto-discovery)
    - Handlers: parse input, validate, one gateway call, shape the response
"""

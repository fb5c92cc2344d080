"""Pydantic Schemas - request/response validation contracts for API endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, responses)
    - JSON keys are camelCase; Python attributes are snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""

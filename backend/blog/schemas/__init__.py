"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, response projections)
    - JSON keys are camelCase; Python attributes are snake_case
"""

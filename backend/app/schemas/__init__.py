"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request payloads, responses)
    - Schemas convert into core records; core never imports schemas
"""

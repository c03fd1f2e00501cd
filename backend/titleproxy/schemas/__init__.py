"""Pydantic Schemas — validation of the remote API payloads.

Invariants:
    - Schemas validate at system boundary (remote API responses)
"""

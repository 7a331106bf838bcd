"""Pydantic Schemas — validation of untrusted input at the system boundary.

Invariants:
    - Schemas validate raw form fields before any store access
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from models: schemas are input contracts, models are persistence
"""

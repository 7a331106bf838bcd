"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes translate outcomes to HTTP; decisions live in services/

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""

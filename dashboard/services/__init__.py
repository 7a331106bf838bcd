"""Services Layer — action orchestration and credential verification.

Invariants:
    - Services receive their collaborators explicitly (no module-level store handle)
    - Services return outcomes; routes perform the HTTP side of them
"""

"""Infrastructure Layer — store access, hashing, sessions, logging.

Invariants:
    - Infrastructure never decides business outcomes; it reports them
    - Driver errors are mapped to DashboardError subclasses at this boundary
"""

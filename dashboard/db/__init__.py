"""Database Infrastructure — SQLAlchemy declarative Base.

Design Decisions:
    - asyncpg driver for PostgreSQL (ADR: native async, no thread pool overhead)
"""

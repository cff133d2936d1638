"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - Single async engine per process (initialized via infrastructure.database.init_db)
    - asyncpg driver for PostgreSQL, aiosqlite in tests
"""

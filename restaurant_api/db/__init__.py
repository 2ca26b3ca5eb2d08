"""Database Infrastructure: SQLAlchemy declarative Base shared by all models.

Invariants:
    - All sessions are async (AsyncSession)
"""

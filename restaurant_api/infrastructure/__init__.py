"""Infrastructure Layer: storage access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports domain rules from core/ (errors excepted)
    - Every SQLAlchemy failure is mapped to DatabaseError before leaving this layer
"""

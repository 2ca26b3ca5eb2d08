"""Core Layer: pure domain logic, error types and boundary protocols.

Invariants:
    - Core never imports from infrastructure/, services/ or api/
    - No IO in core modules; storage access only through repository_protocols
"""

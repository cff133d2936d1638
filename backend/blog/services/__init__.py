"""Services — async orchestration between API routes and the ORM.

Invariants:
    - Services receive an AsyncSession; they never open their own
    - Domain failures surface as BlogError subclasses
"""

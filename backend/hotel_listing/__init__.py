"""
Hotel Listing Backend — Application Package
=============================================

Layered architecture:

    ┌─────────────────────────────────────┐
    │    Routes + Security + Versioning   │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Rules)   │  ← validation, status decisions
    ├─────────────────────────────────────┤
    │   Mappers / Schemas (DTOs)          │  ← Pydantic contracts
    ├─────────────────────────────────────┤
    │   Unit of Work / Repositories       │  ← one session, one commit
    ├─────────────────────────────────────┤
    │   Models / Database                 │  ← SQLAlchemy async
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"

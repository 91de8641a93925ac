"""
Booklist Backend - Application Package Initializer
===================================================

What: Marks the `app` directory as a Python package.
Who:  Used by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is a CRUD gateway for three resource types (books, movies,
    shows). Every resource flows through the same layers:

    ┌─────────────────────────────────────┐
    │        Routes (Request Handler)     │  ← HTTP concerns: status codes, headers
    ├─────────────────────────────────────┤
    │   Services + Resources (Model)      │  ← Presence validation, filters, merge
    ├─────────────────────────────────────┤
    │           Serializers               │  ← Record → canonical JSON mapping
    ├─────────────────────────────────────┤
    │     Store (Persistence Client)      │  ← find / insert / update / delete
    └─────────────────────────────────────┘

    Resources differ only in their declarations (fields, required fields,
    filterable fields), so each layer is written once and parameterized by a
    ResourceDefinition.
"""

__version__ = "1.0.0"

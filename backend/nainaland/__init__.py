"""
Nainaland Backend — Application Package Initializer
====================================================

What: Marks the `nainaland` directory as a Python package.
Why:  Enables module imports like `from nainaland.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend follows the same layered shape as every route it serves:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, auth gate
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← not-found translation, logging
    ├─────────────────────────────────────┤
    │            Schemas (Data)           │  ← Pydantic records + API contracts
    ├─────────────────────────────────────┤
    │         Storage (In-Memory)         │  ← MemStorage, one dict per entity
    └─────────────────────────────────────┘

    The storage layer holds the only state. It is created by the application
    factory and hung off `app.state`, so every test can build its own.
"""

__version__ = "1.0.0"

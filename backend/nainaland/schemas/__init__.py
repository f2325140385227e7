"""
Nainaland Backend — Pydantic Schemas
======================================

What:  Records held by the store and the request/response contracts of the API.
Why:   One definition per entity drives validation, storage and OpenAPI docs.

Naming convention per entity E:
    ECreate  — insert shape accepted by POST and by MemStorage.create_*
    EUpdate  — explicit partial-update struct accepted by PUT
    E        — the stored record (immutable) returned by every read

Wire format:
    The browser client speaks camelCase (isFeatured, propertyType, createdAt).
    Fields carry camelCase aliases; `populate_by_name` lets Python code use the
    snake_case names. FastAPI serializes responses by alias.
"""

# Middleware package init
"""
Nainaland Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Rate Limit] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first: correlation id for logs and every error body, 429 included
    2. Rate Limit: reject contact-form and login floods before any handler work
    3. Logging: one access line per request, tagged with the request id
    4. GZip / CORS: provided by Starlette/FastAPI

    Responses travel back through the same chain in reverse.
"""

# Routes package init
"""
Nainaland Backend — API Routes Package
========================================

Route Inventory:
    - auth.py:          POST /api/auth/login, GET /api/auth/me
    - properties.py:    /api/properties        (reads public, writes admin)
    - blogs.py:         /api/blogs             (reads public, writes admin)
    - testimonials.py:  /api/testimonials      (reads public, writes admin)
    - messages.py:      /api/messages          (POST public, everything else admin)
    - health.py:        GET /health

Routes are THIN: pull data out of the request, call a service with the
app's store, return the record. Auth is a dependency, never inline code.
"""

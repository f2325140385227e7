# Services package init
"""
Nainaland Backend — Services Layer
====================================

What:  Business logic between routes (HTTP) and storage.
Why:   Routes stay thin; services can be tested against a bare MemStorage.
How:   Each service is stateless. The store is passed in on every call, the
       same way a database session would be, so one service instance serves
       every app and every test.

Service Inventory:
    - AuthService:        login and bearer-token resolution
    - PropertyService:    catalog listing, filters and admin CRUD
    - BlogService:        blog post CRUD
    - MessageService:     contact form intake, admin inbox, read flag
    - TestimonialService: testimonial CRUD

Storage returns None/False for unknown ids; services turn that into
NotFoundError so the global handler answers 404.
"""

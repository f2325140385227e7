"""
Nainaland Backend — FastAPI Dependencies
==========================================

What:  Request-scoped access to the application's store and the admin gate.
How:   `get_storage` reads the MemStorage that create_app() attached to
       app.state. `require_admin` turns the Authorization header into a User
       or fails the request with 401 before the handler runs.

Example usage in a route:
    @router.post("/properties")
    async def create_property(
        data: PropertyCreate,
        storage: MemStorage = Depends(get_storage),
        admin: User = Depends(require_admin),
    ): ...
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from nainaland.schemas.user import User
from nainaland.services.auth_service import auth_service
from nainaland.storage import MemStorage

# auto_error=False: a missing or non-Bearer header reaches require_admin as
# None, so the 401 goes through our error format instead of FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


def get_storage(request: Request) -> MemStorage:
    return request.app.state.storage


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    storage: MemStorage = Depends(get_storage),
) -> User:
    token = credentials.credentials if credentials else None
    return auth_service.authenticate(storage, token)

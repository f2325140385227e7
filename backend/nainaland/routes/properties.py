"""
Nainaland Backend — Property Route Handlers
=============================================

What:  The land catalog (public) and listing management (admin).

Caching Strategy:
    The browser client caches GETs by path and invalidates the key after a
    mutation, so list/detail responses are sent with `no-cache` to make it
    revalidate instead of trusting a stale copy after an admin edit.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from nainaland.dependencies import get_storage, require_admin
from nainaland.schemas.common import DeleteResponse, ErrorResponse
from nainaland.schemas.property import Property, PropertyCreate, PropertyType, PropertyUpdate
from nainaland.schemas.user import User
from nainaland.services.property_service import property_service
from nainaland.storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/properties", tags=["Properties"])

_NOT_FOUND = {404: {"description": "Property not found", "model": ErrorResponse}}
_ADMIN_ONLY = {
    400: {"description": "Invalid property data", "model": ErrorResponse},
    401: {"description": "Missing or invalid token", "model": ErrorResponse},
}


@router.get(
    "",
    response_model=List[Property],
    summary="List properties, optionally filtered by type or featured flag",
)
async def list_properties(
    response: Response,
    property_type: Optional[PropertyType] = Query(
        default=None,
        alias="type",
        description="Only listings of this type, e.g. Agricultural",
    ),
    featured: bool = Query(
        default=False,
        description="Only featured listings (ignored when `type` is given)",
    ),
    storage: MemStorage = Depends(get_storage),
) -> List[Property]:
    response.headers["Cache-Control"] = "no-cache"
    return property_service.list_properties(storage, property_type=property_type, featured=featured)


@router.get(
    "/{property_id}",
    response_model=Property,
    responses=_NOT_FOUND,
    summary="Get a single property",
)
async def get_property(
    property_id: int,
    response: Response,
    storage: MemStorage = Depends(get_storage),
) -> Property:
    response.headers["Cache-Control"] = "no-cache"
    return property_service.get_property(storage, property_id)


@router.post(
    "",
    response_model=Property,
    status_code=status.HTTP_201_CREATED,
    responses=_ADMIN_ONLY,
    summary="Create a property (admin)",
)
async def create_property(
    data: PropertyCreate,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
) -> Property:
    return property_service.create_property(storage, data)


@router.put(
    "/{property_id}",
    response_model=Property,
    responses={**_ADMIN_ONLY, **_NOT_FOUND},
    summary="Update some fields of a property (admin)",
)
async def update_property(
    property_id: int,
    changes: PropertyUpdate,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
) -> Property:
    return property_service.update_property(storage, property_id, changes)


@router.delete(
    "/{property_id}",
    response_model=DeleteResponse,
    responses={**_ADMIN_ONLY, **_NOT_FOUND},
    summary="Delete a property (admin)",
)
async def delete_property(
    property_id: int,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
) -> DeleteResponse:
    property_service.delete_property(storage, property_id)
    return DeleteResponse(success=True)

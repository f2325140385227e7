"""
Nainaland Backend — Testimonial Route Handlers
"""

from typing import List

from fastapi import APIRouter, Depends, status

from nainaland.dependencies import get_storage, require_admin
from nainaland.schemas.common import DeleteResponse, ErrorResponse
from nainaland.schemas.testimonial import Testimonial, TestimonialCreate, TestimonialUpdate
from nainaland.schemas.user import User
from nainaland.services.testimonial_service import testimonial_service
from nainaland.storage import MemStorage

router = APIRouter(prefix="/api/testimonials", tags=["Testimonials"])

_NOT_FOUND = {404: {"description": "Testimonial not found", "model": ErrorResponse}}
_ADMIN_ONLY = {
    400: {"description": "Invalid testimonial data", "model": ErrorResponse},
    401: {"description": "Missing or invalid token", "model": ErrorResponse},
}


@router.get("", response_model=List[Testimonial], summary="List testimonials")
async def list_testimonials(storage: MemStorage = Depends(get_storage)) -> List[Testimonial]:
    return testimonial_service.list_testimonials(storage)


@router.get(
    "/{testimonial_id}",
    response_model=Testimonial,
    responses=_NOT_FOUND,
    summary="Get a testimonial",
)
async def get_testimonial(
    testimonial_id: int, storage: MemStorage = Depends(get_storage)
) -> Testimonial:
    return testimonial_service.get_testimonial(storage, testimonial_id)


@router.post(
    "",
    response_model=Testimonial,
    status_code=status.HTTP_201_CREATED,
    responses=_ADMIN_ONLY,
    summary="Add a testimonial (admin)",
)
async def create_testimonial(
    data: TestimonialCreate,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
) -> Testimonial:
    return testimonial_service.create_testimonial(storage, data)


@router.put(
    "/{testimonial_id}",
    response_model=Testimonial,
    responses={**_ADMIN_ONLY, **_NOT_FOUND},
    summary="Edit a testimonial (admin)",
)
async def update_testimonial(
    testimonial_id: int,
    changes: TestimonialUpdate,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
) -> Testimonial:
    return testimonial_service.update_testimonial(storage, testimonial_id, changes)


@router.delete(
    "/{testimonial_id}",
    response_model=DeleteResponse,
    responses={**_ADMIN_ONLY, **_NOT_FOUND},
    summary="Delete a testimonial (admin)",
)
async def delete_testimonial(
    testimonial_id: int,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
) -> DeleteResponse:
    testimonial_service.delete_testimonial(storage, testimonial_id)
    return DeleteResponse(success=True)

"""
Nainaland Backend — Blog Route Handlers
"""

from typing import List

from fastapi import APIRouter, Depends, status

from nainaland.dependencies import get_storage, require_admin
from nainaland.schemas.blog import BlogPost, BlogPostCreate, BlogPostUpdate
from nainaland.schemas.common import DeleteResponse, ErrorResponse
from nainaland.schemas.user import User
from nainaland.services.blog_service import blog_service
from nainaland.storage import MemStorage

router = APIRouter(prefix="/api/blogs", tags=["Blog"])

_NOT_FOUND = {404: {"description": "Blog post not found", "model": ErrorResponse}}
_ADMIN_ONLY = {
    400: {"description": "Invalid blog data", "model": ErrorResponse},
    401: {"description": "Missing or invalid token", "model": ErrorResponse},
}


@router.get("", response_model=List[BlogPost], summary="List blog posts")
async def list_posts(storage: MemStorage = Depends(get_storage)) -> List[BlogPost]:
    return blog_service.list_posts(storage)


@router.get("/{post_id}", response_model=BlogPost, responses=_NOT_FOUND, summary="Get a blog post")
async def get_post(post_id: int, storage: MemStorage = Depends(get_storage)) -> BlogPost:
    return blog_service.get_post(storage, post_id)


@router.post(
    "",
    response_model=BlogPost,
    status_code=status.HTTP_201_CREATED,
    responses=_ADMIN_ONLY,
    summary="Publish a blog post (admin)",
)
async def create_post(
    data: BlogPostCreate,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
) -> BlogPost:
    return blog_service.create_post(storage, data)


@router.put(
    "/{post_id}",
    response_model=BlogPost,
    responses={**_ADMIN_ONLY, **_NOT_FOUND},
    summary="Edit a blog post (admin)",
)
async def update_post(
    post_id: int,
    changes: BlogPostUpdate,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
) -> BlogPost:
    return blog_service.update_post(storage, post_id, changes)


@router.delete(
    "/{post_id}",
    response_model=DeleteResponse,
    responses={**_ADMIN_ONLY, **_NOT_FOUND},
    summary="Delete a blog post (admin)",
)
async def delete_post(
    post_id: int,
    storage: MemStorage = Depends(get_storage),
    admin: User = Depends(require_admin),
) -> DeleteResponse:
    blog_service.delete_post(storage, post_id)
    return DeleteResponse(success=True)

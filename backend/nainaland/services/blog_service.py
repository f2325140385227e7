"""
Nainaland Backend — Blog Service
"""

import logging
from typing import List

from nainaland.exceptions import NotFoundError
from nainaland.schemas.blog import BlogPost, BlogPostCreate, BlogPostUpdate
from nainaland.storage import MemStorage

logger = logging.getLogger(__name__)


class BlogService:
    """CRUD for blog posts. Reads are public, writes come from the admin UI."""

    def list_posts(self, storage: MemStorage) -> List[BlogPost]:
        return storage.get_all_blog_posts()

    def get_post(self, storage: MemStorage, post_id: int) -> BlogPost:
        post = storage.get_blog_post(post_id)
        if post is None:
            raise NotFoundError(resource="blog post", resource_id=post_id)
        return post

    def create_post(self, storage: MemStorage, data: BlogPostCreate) -> BlogPost:
        post = storage.create_blog_post(data)
        logger.info("Created blog post %d by %s", post.id, post.author)
        return post

    def update_post(self, storage: MemStorage, post_id: int, changes: BlogPostUpdate) -> BlogPost:
        post = storage.update_blog_post(post_id, changes)
        if post is None:
            raise NotFoundError(resource="blog post", resource_id=post_id)
        logger.info("Updated blog post %d: %s", post_id, sorted(changes.changed_fields()))
        return post

    def delete_post(self, storage: MemStorage, post_id: int) -> None:
        if not storage.delete_blog_post(post_id):
            raise NotFoundError(resource="blog post", resource_id=post_id)
        logger.info("Deleted blog post %d", post_id)


blog_service = BlogService()

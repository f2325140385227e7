"""
Nainaland Backend — Blog Post Schemas
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from nainaland.schemas.common import InsertModel, RecordModel, UpdateModel


class BlogPostCreate(InsertModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    excerpt: str = Field(min_length=1, max_length=500, description="Teaser shown on the blog card")
    author: str = Field(min_length=1, max_length=100)
    image: str = Field(min_length=1, description="Cover image URL")


class BlogPostUpdate(UpdateModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1)
    excerpt: Optional[str] = Field(default=None, min_length=1, max_length=500)
    author: Optional[str] = Field(default=None, min_length=1, max_length=100)
    image: Optional[str] = Field(default=None, min_length=1)


class BlogPost(RecordModel):
    id: int
    title: str
    content: str
    excerpt: str
    author: str
    image: str
    created_at: datetime = Field(alias="createdAt")

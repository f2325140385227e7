"""
Nainaland Backend — Testimonial Schemas
"""

from typing import Optional

from pydantic import Field

from nainaland.schemas.common import InsertModel, RecordModel, UpdateModel


class TestimonialCreate(InsertModel):
    name: str = Field(min_length=1, max_length=100)
    location: str = Field(min_length=1, max_length=100)
    message: str = Field(min_length=1)
    # Half stars are shown in the UI, so 4.5 is valid
    rating: float = Field(ge=0, le=5)
    image: str = Field(min_length=1, description="Avatar URL")


class TestimonialUpdate(UpdateModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    location: Optional[str] = Field(default=None, min_length=1, max_length=100)
    message: Optional[str] = Field(default=None, min_length=1)
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    image: Optional[str] = Field(default=None, min_length=1)


class Testimonial(RecordModel):
    id: int
    name: str
    location: str
    message: str
    rating: float
    image: str

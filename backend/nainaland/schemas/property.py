"""
Nainaland Backend — Property Schemas
======================================

What:  Land listings shown in the public catalog and managed from the admin UI.

Field notes:
    price      Whole rupees; the catalog never shows paise, so it is an int.
    size       Paired with size_unit; the same plot may be quoted in Guntha
               or Acres, so no conversion happens server-side.
    features   Short bullet labels ("Corner Plot", "Borewell"), display order kept.
    images     Image URLs, first one is the card thumbnail.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from nainaland.schemas.common import InsertModel, RecordModel, UpdateModel


class SizeUnit(str, Enum):
    GUNTHA = "Guntha"
    ACRES = "Acres"
    SQ_FT = "Sq.ft"


class PropertyType(str, Enum):
    RESIDENTIAL = "Residential"
    AGRICULTURAL = "Agricultural"
    COMMERCIAL = "Commercial"
    FARM_HOUSE = "FarmHouse"


class PropertyCreate(InsertModel):
    """Insert shape for POST /api/properties."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    price: int = Field(gt=0, description="Asking price in rupees")
    location: str = Field(min_length=1, max_length=200)
    size: float = Field(gt=0)
    size_unit: SizeUnit = Field(alias="sizeUnit")
    features: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    is_featured: bool = Field(default=False, alias="isFeatured")
    property_type: PropertyType = Field(alias="propertyType")


class PropertyUpdate(UpdateModel):
    """Partial update for PUT /api/properties/{id}; unset fields are left alone."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, min_length=1)
    price: Optional[int] = Field(default=None, gt=0)
    location: Optional[str] = Field(default=None, min_length=1, max_length=200)
    size: Optional[float] = Field(default=None, gt=0)
    size_unit: Optional[SizeUnit] = Field(default=None, alias="sizeUnit")
    features: Optional[List[str]] = None
    images: Optional[List[str]] = None
    is_featured: Optional[bool] = Field(default=None, alias="isFeatured")
    property_type: Optional[PropertyType] = Field(default=None, alias="propertyType")


class Property(RecordModel):
    """A stored listing."""

    id: int
    title: str
    description: str
    price: int
    location: str
    size: float
    size_unit: SizeUnit = Field(alias="sizeUnit")
    features: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    is_featured: bool = Field(default=False, alias="isFeatured")
    property_type: PropertyType = Field(alias="propertyType")
    created_at: datetime = Field(alias="createdAt")

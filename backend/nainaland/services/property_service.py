"""
Nainaland Backend — Property Service
======================================

What:  Catalog reads for the public site and listing management for admins.
Who:   Called by the /api/properties route handlers.

Listing filters (GET /api/properties):
    type=Agricultural   → only that property type
    featured=true       → only featured listings (home page carousel)
    neither             → every listing in insertion order
    When both are given, `type` wins; the public pages never send both.
"""

import logging
from typing import List, Optional

from nainaland.exceptions import NotFoundError
from nainaland.schemas.property import Property, PropertyCreate, PropertyType, PropertyUpdate
from nainaland.storage import MemStorage

logger = logging.getLogger(__name__)


class PropertyService:
    """Business logic for land listings."""

    def list_properties(
        self,
        storage: MemStorage,
        property_type: Optional[PropertyType] = None,
        featured: bool = False,
    ) -> List[Property]:
        if property_type is not None:
            return storage.get_properties_by_type(property_type)
        if featured:
            return storage.get_featured_properties()
        return storage.get_all_properties()

    def get_property(self, storage: MemStorage, property_id: int) -> Property:
        """
        Raises:
            NotFoundError: No listing with this id (→ 404)
        """
        prop = storage.get_property(property_id)
        if prop is None:
            raise NotFoundError(resource="property", resource_id=property_id)
        return prop

    def create_property(self, storage: MemStorage, data: PropertyCreate) -> Property:
        prop = storage.create_property(data)
        logger.info("Created property %d (%s)", prop.id, prop.property_type.value)
        return prop

    def update_property(
        self, storage: MemStorage, property_id: int, changes: PropertyUpdate
    ) -> Property:
        prop = storage.update_property(property_id, changes)
        if prop is None:
            raise NotFoundError(resource="property", resource_id=property_id)
        logger.info(
            "Updated property %d: %s", property_id, sorted(changes.changed_fields())
        )
        return prop

    def delete_property(self, storage: MemStorage, property_id: int) -> None:
        if not storage.delete_property(property_id):
            raise NotFoundError(resource="property", resource_id=property_id)
        logger.info("Deleted property %d", property_id)


property_service = PropertyService()

"""
Nainaland Backend — Testimonial Service
"""

import logging
from typing import List

from nainaland.exceptions import NotFoundError
from nainaland.schemas.testimonial import Testimonial, TestimonialCreate, TestimonialUpdate
from nainaland.storage import MemStorage

logger = logging.getLogger(__name__)


class TestimonialService:
    __test__ = False  # keep pytest from collecting this as a test class

    def list_testimonials(self, storage: MemStorage) -> List[Testimonial]:
        return storage.get_all_testimonials()

    def get_testimonial(self, storage: MemStorage, testimonial_id: int) -> Testimonial:
        testimonial = storage.get_testimonial(testimonial_id)
        if testimonial is None:
            raise NotFoundError(resource="testimonial", resource_id=testimonial_id)
        return testimonial

    def create_testimonial(self, storage: MemStorage, data: TestimonialCreate) -> Testimonial:
        testimonial = storage.create_testimonial(data)
        logger.info("Created testimonial %d", testimonial.id)
        return testimonial

    def update_testimonial(
        self, storage: MemStorage, testimonial_id: int, changes: TestimonialUpdate
    ) -> Testimonial:
        testimonial = storage.update_testimonial(testimonial_id, changes)
        if testimonial is None:
            raise NotFoundError(resource="testimonial", resource_id=testimonial_id)
        logger.info("Updated testimonial %d: %s", testimonial_id, sorted(changes.changed_fields()))
        return testimonial

    def delete_testimonial(self, storage: MemStorage, testimonial_id: int) -> None:
        if not storage.delete_testimonial(testimonial_id):
            raise NotFoundError(resource="testimonial", resource_id=testimonial_id)
        logger.info("Deleted testimonial %d", testimonial_id)


testimonial_service = TestimonialService()

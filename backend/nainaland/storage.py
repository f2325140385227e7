"""
Nainaland Backend — In-Memory Storage
=======================================

What:  The authoritative source of truth for users, properties, blog posts,
       messages and testimonials.
Why:   The site has no persistence requirement; a process-lifetime store seeded
       with sample data at startup is all the catalog needs.
How:   One Collection per entity: a dict keyed by integer id plus a counter
       that hands out the next id. MemStorage exposes the CRUD contract on top.
Who:   Owned by the application (app.state.storage); reached by services via
       the `get_storage` dependency.
When:  Constructed once per app by create_app(); cleared on shutdown.

Contract:
    - get_*           → record, or None when the id is unknown
    - create_*        → assigns the next id, stamps created_at where the
                        entity has one, returns the stored record
    - update_*        → merges the update struct's explicitly set fields over
                        the stored record; None when the id is unknown
    - delete_*        → True if a record was removed
    The store never raises for a well-formed input. Schema validation happens
    before a payload reaches it.

Concurrency:
    Every operation is a synchronous dict read or write with no await inside,
    so under the single event loop no request can observe a half-applied
    mutation. Last write wins.

Ids:
    Counters only move forward. Deleting record 3 never makes id 3 available
    again, and ids are independent per entity type.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from nainaland.schemas.blog import BlogPost, BlogPostCreate, BlogPostUpdate
from nainaland.schemas.common import RecordModel, UpdateModel
from nainaland.schemas.message import Message, MessageCreate
from nainaland.schemas.property import Property, PropertyCreate, PropertyType, PropertyUpdate
from nainaland.schemas.testimonial import Testimonial, TestimonialCreate, TestimonialUpdate
from nainaland.schemas.user import User

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=RecordModel)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Collection(Generic[RecordT]):
    """
    Insertion-ordered map of id → record with its own id counter.

    Python dicts preserve insertion order, and replacing the value of an
    existing key keeps its position, so all() stays in creation order even
    after updates.
    """

    def __init__(self, name: str):
        self.name = name
        self._records: Dict[int, RecordT] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> List[RecordT]:
        return list(self._records.values())

    def get(self, record_id: int) -> Optional[RecordT]:
        return self._records.get(record_id)

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        return next((r for r in self._records.values() if predicate(r)), None)

    def filter(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        return [r for r in self._records.values() if predicate(r)]

    def insert(self, build: Callable[[int], RecordT]) -> RecordT:
        """Build a record around the next id and store it."""
        record_id = self._next_id
        self._next_id += 1
        record = build(record_id)
        self._records[record_id] = record
        return record

    def merge(self, record_id: int, changes: UpdateModel) -> Optional[RecordT]:
        """
        Shallow-merge the set fields of `changes` over the stored record.

        id and created_at are not fields of any update struct, so they can
        never be overwritten here.
        """
        current = self._records.get(record_id)
        if current is None:
            return None
        updated = current.model_copy(update=changes.changed_fields())
        self._records[record_id] = updated
        return updated

    def replace(self, record_id: int, **fields) -> Optional[RecordT]:
        current = self._records.get(record_id)
        if current is None:
            return None
        updated = current.model_copy(update=fields)
        self._records[record_id] = updated
        return updated

    def remove(self, record_id: int) -> bool:
        return self._records.pop(record_id, None) is not None

    def clear(self) -> None:
        self._records.clear()
        self._next_id = 1


class MemStorage:
    """
    In-memory store for every entity the site manages.

    Construct one per application (or per test). Nothing here is global.
    """

    def __init__(self):
        self.users: Collection[User] = Collection("users")
        self.properties: Collection[Property] = Collection("properties")
        self.blog_posts: Collection[BlogPost] = Collection("blog_posts")
        self.messages: Collection[Message] = Collection("messages")
        self.testimonials: Collection[Testimonial] = Collection("testimonials")

    def _collections(self) -> List[Collection]:
        return [self.users, self.properties, self.blog_posts, self.messages, self.testimonials]

    def counts(self) -> Dict[str, int]:
        """Record count per collection (used by the health check)."""
        return {c.name: len(c) for c in self._collections()}

    def clear(self) -> None:
        """Drop every record and reset every id counter."""
        for collection in self._collections():
            collection.clear()
        logger.info("Storage cleared")

    # ── Users ─────────────────────────────────────────────────────────────

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.find(lambda u: u.username == username)

    def create_user(self, username: str, password_hash: str) -> User:
        """Store a user. The caller hashes the password and checks uniqueness."""
        return self.users.insert(
            lambda new_id: User(id=new_id, username=username, password_hash=password_hash)
        )

    # ── Properties ────────────────────────────────────────────────────────

    def get_all_properties(self) -> List[Property]:
        return self.properties.all()

    def get_property(self, property_id: int) -> Optional[Property]:
        return self.properties.get(property_id)

    def get_properties_by_type(self, property_type: PropertyType) -> List[Property]:
        return self.properties.filter(lambda p: p.property_type == property_type)

    def get_featured_properties(self) -> List[Property]:
        return self.properties.filter(lambda p: p.is_featured)

    def create_property(self, data: PropertyCreate) -> Property:
        created_at = _utcnow()
        return self.properties.insert(
            lambda new_id: Property(id=new_id, created_at=created_at, **data.model_dump())
        )

    def update_property(self, property_id: int, changes: PropertyUpdate) -> Optional[Property]:
        return self.properties.merge(property_id, changes)

    def delete_property(self, property_id: int) -> bool:
        return self.properties.remove(property_id)

    # ── Blog posts ────────────────────────────────────────────────────────

    def get_all_blog_posts(self) -> List[BlogPost]:
        return self.blog_posts.all()

    def get_blog_post(self, post_id: int) -> Optional[BlogPost]:
        return self.blog_posts.get(post_id)

    def create_blog_post(self, data: BlogPostCreate) -> BlogPost:
        created_at = _utcnow()
        return self.blog_posts.insert(
            lambda new_id: BlogPost(id=new_id, created_at=created_at, **data.model_dump())
        )

    def update_blog_post(self, post_id: int, changes: BlogPostUpdate) -> Optional[BlogPost]:
        return self.blog_posts.merge(post_id, changes)

    def delete_blog_post(self, post_id: int) -> bool:
        return self.blog_posts.remove(post_id)

    # ── Messages ──────────────────────────────────────────────────────────

    def get_all_messages(self) -> List[Message]:
        return self.messages.all()

    def get_message(self, message_id: int) -> Optional[Message]:
        return self.messages.get(message_id)

    def create_message(self, data: MessageCreate) -> Message:
        created_at = _utcnow()
        return self.messages.insert(
            lambda new_id: Message(
                id=new_id, is_read=False, created_at=created_at, **data.model_dump()
            )
        )

    def set_message_read_status(self, message_id: int, is_read: bool) -> Optional[Message]:
        return self.messages.replace(message_id, is_read=is_read)

    def delete_message(self, message_id: int) -> bool:
        return self.messages.remove(message_id)

    # ── Testimonials ──────────────────────────────────────────────────────

    def get_all_testimonials(self) -> List[Testimonial]:
        return self.testimonials.all()

    def get_testimonial(self, testimonial_id: int) -> Optional[Testimonial]:
        return self.testimonials.get(testimonial_id)

    def create_testimonial(self, data: TestimonialCreate) -> Testimonial:
        return self.testimonials.insert(
            lambda new_id: Testimonial(id=new_id, **data.model_dump())
        )

    def update_testimonial(
        self, testimonial_id: int, changes: TestimonialUpdate
    ) -> Optional[Testimonial]:
        return self.testimonials.merge(testimonial_id, changes)

    def delete_testimonial(self, testimonial_id: int) -> bool:
        return self.testimonials.remove(testimonial_id)

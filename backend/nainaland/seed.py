"""
Nainaland Backend — Seed Data
===============================

What:  The admin account and the sample catalog inserted into a fresh store.
When:  Called by create_app() when it builds its own MemStorage. A restart
       therefore always comes back to exactly this data set.
"""

import logging

from nainaland.schemas.blog import BlogPostCreate
from nainaland.schemas.property import PropertyCreate
from nainaland.schemas.testimonial import TestimonialCreate
from nainaland.security import hash_password
from nainaland.storage import MemStorage

logger = logging.getLogger(__name__)

_UNSPLASH = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w={}&h={}&q=80"


def _photo(photo_id: str) -> str:
    return _UNSPLASH.format(photo_id, 500, 300)


def _avatar(photo_id: str) -> str:
    return _UNSPLASH.format(photo_id, 100, 100)


SAMPLE_PROPERTIES = [
    {
        "title": "Premium Residential Plot",
        "description": "A beautiful residential plot in a prime location with excellent connectivity.",
        "price": 12_000_000,
        "location": "Electronic City, Bangalore",
        "size": 20,
        "sizeUnit": "Guntha",
        "features": ["60 ft Road", "BMRDA Approved", "Corner Plot"],
        "images": [_photo("1500382017468-9049fed747ef")],
        "isFeatured": True,
        "propertyType": "Residential",
    },
    {
        "title": "Fertile Agricultural Land",
        "description": "Fertile land suitable for various crops with good water source.",
        "price": 9_000_000,
        "location": "Srirangapatna, Mysore",
        "size": 2,
        "sizeUnit": "Acres",
        "features": ["Borewell", "Fertile Soil", "Road Access"],
        "images": [_photo("1628744404730-5e143358539b")],
        "isFeatured": False,
        "propertyType": "Agricultural",
    },
    {
        "title": "Commercial Land",
        "description": "Prime commercial land suitable for business development.",
        "price": 35_000_000,
        "location": "Gachibowli, Hyderabad",
        "size": 40,
        "sizeUnit": "Guntha",
        "features": ["Highway Access", "Commercial Zone", "Prime Location"],
        "images": [_photo("1628624747186-a941c476b7ef")],
        "isFeatured": False,
        "propertyType": "Commercial",
    },
    {
        "title": "Prime Corner Plot",
        "description": "East-facing corner plot in a developing residential area.",
        "price": 8_500_000,
        "location": "Sholinganallur, Chennai",
        "size": 12,
        "sizeUnit": "Guntha",
        "features": ["Corner Plot", "East Facing", "Residential Area"],
        "images": [_photo("1531971589569-0d9370cbe1e5")],
        "isFeatured": False,
        "propertyType": "Residential",
    },
    {
        "title": "Gated Community Plot",
        "description": "Premium plot in a gated community with all amenities.",
        "price": 15_000_000,
        "location": "Whitefield, Bangalore",
        "size": 15,
        "sizeUnit": "Guntha",
        "features": ["Gated", "Park View", "24/7 Security"],
        "images": [_photo("1602941525421-8f8b81d3edbb")],
        "isFeatured": True,
        "propertyType": "Residential",
    },
    {
        "title": "Premium Farmland",
        "description": "Beautiful farmland with hill view and natural water source.",
        "price": 7_500_000,
        "location": "Devanahalli, Bangalore",
        "size": 1,
        "sizeUnit": "Acres",
        "features": ["Water Source", "Hill View", "Farmhouse Permitted"],
        "images": [_photo("1543746379-c5d6bc868f57")],
        "isFeatured": False,
        "propertyType": "Agricultural",
    },
]

SAMPLE_BLOG_POSTS = [
    {
        "title": "5 Things to Consider Before Investing in Land",
        "content": (
            "Detailed article about land investment considerations including location, "
            "legal verification, future development plans, return on investment analysis, "
            "and infrastructure development."
        ),
        "excerpt": (
            "Learn the essential factors you should evaluate before making a land "
            "investment to ensure maximum returns."
        ),
        "author": "Ananya Sharma",
        "image": _photo("1542879379-a2761ec6d9b5"),
    },
    {
        "title": "Legal Checklist for Land Purchase in India",
        "content": (
            "Comprehensive guide covering all legal documents required for land purchase "
            "in India, including title deed verification, encumbrance certificate, land use "
            "conversion, and tax compliance."
        ),
        "excerpt": (
            "Understand the essential legal documents and verifications required when "
            "purchasing land property in India."
        ),
        "author": "Raj Malhotra",
        "image": _photo("1526948531399-320e7e40f0ca"),
    },
    {
        "title": "Land Value Trends to Watch in 2023",
        "content": (
            "Analysis of current land value trends across major Indian cities, future growth "
            "prospects, and recommendations for potential investors."
        ),
        "excerpt": (
            "Explore the emerging trends in land values and discover which regions are "
            "experiencing the highest growth rates."
        ),
        "author": "Vikram Singh",
        "image": _photo("1594608661623-aa0bd3a69799"),
    },
]

SAMPLE_TESTIMONIALS = [
    {
        "name": "Priya Desai",
        "location": "Bangalore",
        "message": (
            "I was looking for a residential plot in Bangalore for over 6 months. Nainaland "
            "Deals helped me find the perfect plot in just 2 weeks. Their team's knowledge and "
            "support throughout the process was exceptional."
        ),
        "rating": 5,
        "image": _avatar("1494790108377-be9c29b29330"),
    },
    {
        "name": "Arun Kumar",
        "location": "Chennai",
        "message": (
            "The team at Nainaland Deals provided excellent guidance for my agricultural land "
            "investment. Their expertise in legal documentation saved me from potential "
            "complications. Highly recommend their services!"
        ),
        "rating": 5,
        "image": _avatar("1507003211169-0a1dd7228f2d"),
    },
    {
        "name": "Meera Reddy",
        "location": "Hyderabad",
        "message": (
            "As a first-time land investor, I appreciated the transparent approach of Nainaland "
            "Deals. They helped me understand the market and found a property that has already "
            "appreciated by 15% in just a year!"
        ),
        "rating": 4.5,
        "image": _avatar("1573496359142-b8d87734a5a2"),
    },
]


def seed_admin(storage: MemStorage, username: str, password: str) -> None:
    """Create the admin account unless a user with that name already exists."""
    if storage.get_user_by_username(username) is not None:
        return
    storage.create_user(username=username, password_hash=hash_password(password))
    logger.info("Seeded admin user '%s'", username)


def seed_sample_data(storage: MemStorage) -> None:
    """Insert the sample properties, blog posts and testimonials, in that order."""
    for item in SAMPLE_PROPERTIES:
        storage.create_property(PropertyCreate(**item))
    for item in SAMPLE_BLOG_POSTS:
        storage.create_blog_post(BlogPostCreate(**item))
    for item in SAMPLE_TESTIMONIALS:
        storage.create_testimonial(TestimonialCreate(**item))
    logger.info(
        "Seeded %d properties, %d blog posts, %d testimonials",
        len(SAMPLE_PROPERTIES),
        len(SAMPLE_BLOG_POSTS),
        len(SAMPLE_TESTIMONIALS),
    )

"""
Database models for the Restaurant Directory API.

All SQLAlchemy models are imported here so the metadata is complete.
"""

from restaurant_api.models.restaurant import Restaurant

__all__ = [
    "Restaurant",
]

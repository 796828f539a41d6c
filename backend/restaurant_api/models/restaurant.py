"""
Restaurant database model.
"""

from datetime import datetime

from sqlalchemy import Column, String, Float, DateTime

from restaurant_api.database import Base


class Restaurant(Base):
    """Restaurant model; the name is the primary key."""

    __tablename__ = "restaurants"

    name = Column(String, primary_key=True)
    address = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    rating = Column(Float, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Restaurant name={self.name!r}>"

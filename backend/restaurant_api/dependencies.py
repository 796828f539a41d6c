"""
Shared API dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from restaurant_api.database import get_db
from restaurant_api.config import settings
from restaurant_api.services.restaurant_store import RestaurantStore
from restaurant_api.services.json_store import JsonRestaurantStore
from restaurant_api.services.sql_store import SqlRestaurantStore


def get_restaurant_store(db: Session = Depends(get_db)) -> RestaurantStore:
    """
    Return the store selected by settings.STORE_BACKEND.
    """
    if settings.STORE_BACKEND == "json":
        return JsonRestaurantStore(settings.RESTAURANTS_FILE)
    return SqlRestaurantStore(db)

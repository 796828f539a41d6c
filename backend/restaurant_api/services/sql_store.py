"""
Restaurant store backed by the `restaurants` table.

Each operation is a single statement on the given session. Failed writes are
rolled back before the error is raised.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from restaurant_api.core.exceptions import NotFoundError, StorageReadError, StorageWriteError
from restaurant_api.models.restaurant import Restaurant
from restaurant_api.schemas import RestaurantCreate, RestaurantResponse, RestaurantUpdate
from restaurant_api.services.restaurant_store import RestaurantStore

logger = logging.getLogger(__name__)


class SqlRestaurantStore(RestaurantStore):
    """Keeps restaurants in a relational table through SQLAlchemy."""

    def __init__(self, db: Session):
        self.db = db

    def _get(self, name: str) -> Optional[Restaurant]:
        try:
            return self.db.query(Restaurant).filter(Restaurant.name == name).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to look up restaurant '{name}': {e}")
            raise StorageReadError(f"Failed to read restaurants: {e}") from e

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise StorageWriteError(f"Failed to {action}: {e}") from e

    def list_all(self) -> List[RestaurantResponse]:
        try:
            rows = self.db.query(Restaurant).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list restaurants: {e}")
            raise StorageReadError(f"Failed to read restaurants: {e}") from e
        return [RestaurantResponse.model_validate(row) for row in rows]

    def get_by_name(self, name: str) -> Optional[RestaurantResponse]:
        row = self._get(name)
        return RestaurantResponse.model_validate(row) if row else None

    def insert(self, restaurant: RestaurantCreate) -> RestaurantResponse:
        row = Restaurant(**restaurant.model_dump())
        self.db.add(row)
        self._commit(f"add restaurant '{restaurant.name}'")
        self.db.refresh(row)
        return RestaurantResponse.model_validate(row)

    def delete_by_name(self, name: str) -> RestaurantResponse:
        row = self._get(name)
        if row is None:
            raise NotFoundError(name)

        removed = RestaurantResponse.model_validate(row)
        self.db.delete(row)
        self._commit(f"delete restaurant '{name}'")
        return removed

    def patch_by_name(self, name: str, changes: RestaurantUpdate) -> RestaurantResponse:
        row = self._get(name)
        if row is None:
            raise NotFoundError(name)

        for field, value in changes.changes().items():
            setattr(row, field, value)
        self._commit(f"update restaurant '{name}'")
        self.db.refresh(row)
        return RestaurantResponse.model_validate(row)

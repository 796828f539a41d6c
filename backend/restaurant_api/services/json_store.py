"""
Restaurant store backed by a single JSON document.

Document shape: {"restaurants": [{"name": ..., "address": ..., "phone": ..., "rating": ...}]}

Every operation reads the whole document and, for mutations, writes it back.
There is no locking: two concurrent writers can lose an update. Writes go to a
temporary file that replaces the document, so a failed write leaves the old
document in place. Only the Restaurant fields are kept on rewrite.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from restaurant_api.core.exceptions import NotFoundError, StorageReadError, StorageWriteError
from restaurant_api.schemas import (
    RestaurantCreate,
    RestaurantListResponse,
    RestaurantResponse,
    RestaurantUpdate,
)
from restaurant_api.services.restaurant_store import RestaurantStore

logger = logging.getLogger(__name__)


class JsonRestaurantStore(RestaurantStore):
    """Keeps restaurants in a JSON file on disk."""

    def __init__(self, file_path: Union[str, Path]):
        self.file_path = Path(file_path)

    def ensure_document(self) -> None:
        """Create an empty document (and its directory) if the file is missing."""
        if self.file_path.exists():
            return
        logger.info(f"Creating empty restaurant document at {self.file_path}")
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageWriteError(f"Failed to create {self.file_path.parent}: {e}") from e
        self._write_document([])

    def _read_document(self) -> List[RestaurantResponse]:
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read restaurant document {self.file_path}: {e}")
            raise StorageReadError(f"Failed to read restaurant document: {e}") from e

        try:
            return RestaurantListResponse.model_validate(data).restaurants
        except ValidationError as e:
            logger.error(f"Restaurant document {self.file_path} is malformed: {e}")
            raise StorageReadError(f"Restaurant document is malformed: {e}") from e

    def _write_document(self, restaurants: List[RestaurantResponse]) -> None:
        document = {
            "restaurants": [
                r.model_dump(mode="json", exclude_none=True) for r in restaurants
            ]
        }
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.file_path.parent, suffix=".tmp", delete=False
            ) as f:
                tmp_path = f.name
                json.dump(document, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            logger.error(f"Failed to write restaurant document {self.file_path}: {e}")
            raise StorageWriteError(f"Failed to write restaurant document: {e}") from e

    @staticmethod
    def _find_index(restaurants: List[RestaurantResponse], name: str) -> int:
        for index, restaurant in enumerate(restaurants):
            if restaurant.name == name:
                return index
        return -1

    def list_all(self) -> List[RestaurantResponse]:
        return self._read_document()

    def get_by_name(self, name: str) -> Optional[RestaurantResponse]:
        restaurants = self._read_document()
        index = self._find_index(restaurants, name)
        return restaurants[index] if index != -1 else None

    def insert(self, restaurant: RestaurantCreate) -> RestaurantResponse:
        restaurants = self._read_document()
        # Duplicate names are accepted as-is
        record = RestaurantResponse(**restaurant.model_dump())
        restaurants.append(record)
        self._write_document(restaurants)
        return record

    def delete_by_name(self, name: str) -> RestaurantResponse:
        restaurants = self._read_document()
        index = self._find_index(restaurants, name)
        if index == -1:
            raise NotFoundError(name)

        removed = restaurants.pop(index)
        self._write_document(restaurants)
        return removed

    def patch_by_name(self, name: str, changes: RestaurantUpdate) -> RestaurantResponse:
        restaurants = self._read_document()
        index = self._find_index(restaurants, name)
        if index == -1:
            raise NotFoundError(name)

        updated = restaurants[index].model_copy(update=changes.changes())
        restaurants[index] = updated
        self._write_document(restaurants)
        return updated

"""
Restaurant store abstraction.

Implementations:
- JsonRestaurantStore (flat JSON document)
- SqlRestaurantStore (SQLAlchemy table)
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from restaurant_api.schemas import RestaurantCreate, RestaurantResponse, RestaurantUpdate


class RestaurantStore(ABC):
    """Abstract base class for restaurant persistence."""

    @abstractmethod
    def list_all(self) -> List[RestaurantResponse]:
        """
        Return every stored restaurant.

        Raises:
            StorageReadError: The medium is unreadable or corrupt.
        """
        pass

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[RestaurantResponse]:
        """
        Return the restaurant with exactly this name, or None.

        Raises:
            StorageReadError: The medium is unreadable or corrupt.
        """
        pass

    @abstractmethod
    def insert(self, restaurant: RestaurantCreate) -> RestaurantResponse:
        """
        Persist a new restaurant and return it as stored.

        Raises:
            StorageWriteError: The record could not be persisted.
        """
        pass

    @abstractmethod
    def delete_by_name(self, name: str) -> RestaurantResponse:
        """
        Remove the first restaurant with this name and return it.

        Raises:
            NotFoundError: No restaurant has this name.
            StorageWriteError: The removal could not be persisted.
        """
        pass

    @abstractmethod
    def patch_by_name(self, name: str, changes: RestaurantUpdate) -> RestaurantResponse:
        """
        Overwrite the fields present in `changes`. The name never changes.

        Raises:
            NotFoundError: No restaurant has this name.
            StorageWriteError: The update could not be persisted.
        """
        pass

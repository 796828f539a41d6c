"""
API endpoints for the restaurant directory.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from restaurant_api.dependencies import get_restaurant_store
from restaurant_api.schemas import (
    ErrorResponse,
    RestaurantCreate,
    RestaurantListResponse,
    RestaurantResponse,
    RestaurantUpdate,
)
from restaurant_api.services.restaurant_store import RestaurantStore

logger = logging.getLogger(__name__)

router = APIRouter(
    responses={500: {"model": ErrorResponse}},
)


@router.get("", response_model=RestaurantListResponse, response_model_exclude_none=True)
def list_restaurants(store: RestaurantStore = Depends(get_restaurant_store)):
    """List all restaurants."""
    return RestaurantListResponse(restaurants=store.list_all())


@router.get("/find", response_model=Optional[RestaurantResponse], response_model_exclude_none=True)
def find_restaurant(
    name: str = Query(..., description="Exact restaurant name"),
    store: RestaurantStore = Depends(get_restaurant_store),
):
    """Find a restaurant by name. Returns null when there is no match."""
    return store.get_by_name(name)


@router.post(
    "",
    response_model=RestaurantResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_restaurant(
    restaurant: RestaurantCreate,
    store: RestaurantStore = Depends(get_restaurant_store),
):
    """Add a new restaurant."""
    created = store.insert(restaurant)
    logger.info(f"Added restaurant '{created.name}'")
    return created


@router.delete(
    "/{name}",
    response_model=RestaurantResponse,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
)
def delete_restaurant(name: str, store: RestaurantStore = Depends(get_restaurant_store)):
    """Delete a restaurant by name and return the removed record."""
    removed = store.delete_by_name(name)
    logger.info(f"Deleted restaurant '{name}'")
    return removed


@router.patch(
    "/{name}",
    response_model=RestaurantResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_restaurant(
    name: str,
    update_data: RestaurantUpdate,
    store: RestaurantStore = Depends(get_restaurant_store),
):
    """
    Update some fields of a restaurant (address, phone, rating).
    The name cannot be changed.
    """
    updated = store.patch_by_name(name, update_data)
    logger.info(f"Updated restaurant '{name}': {sorted(update_data.changes())}")
    return updated

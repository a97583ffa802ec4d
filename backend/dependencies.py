"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating service instances,
so endpoints and tests can swap them independently.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from services.item_info_service import ItemInfoService


def get_item_info_service(db: Session = Depends(get_db)) -> ItemInfoService:
    """
    Factory function for creating ItemInfoService instances.

    Args:
        db: Database session

    Returns:
        ItemInfoService bound to the request's session
    """
    return ItemInfoService(db)

"""
Framework integrations for dashboard_map.
"""
from .fastapi import (
    create_lifespan,
    get_service,
)

__all__ = [
    "create_lifespan",
    "get_service",
]

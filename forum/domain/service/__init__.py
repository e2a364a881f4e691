"""Domain services."""

from .base import Service
from .jwt_service import JWTService

__all__ = ["JWTService", "Service"]

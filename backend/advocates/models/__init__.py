"""Database models."""

# Import all models here so Base.metadata sees them
from advocates.models.advocate import Advocate

__all__ = [
    "Advocate",
]

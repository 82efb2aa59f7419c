"""Database models."""
from api.models.db.progress import TestProgress

__all__ = ["TestProgress"]

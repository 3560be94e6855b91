"""Database models."""
from app.models.user import User
from app.models.category import Category
from app.models.transaction import Transaction

__all__ = ["User", "Category", "Transaction"]

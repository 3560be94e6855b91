"""User model for authentication and data ownership."""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel


class User(BaseModel):
    """User model representing registered account holders."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    # Rely on DB-level ON DELETE CASCADE; prevent SQLAlchemy from NULLing FKs on delete.
    categories: Mapped[list["Category"]] = relationship(
        "Category", back_populates="user", passive_deletes="all"
    )
    transactions: Mapped[list["Transaction"]] = relationship(
        "Transaction", back_populates="user", passive_deletes="all"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"

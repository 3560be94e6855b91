"""Category model for user-defined transaction groupings."""
from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel


class Category(BaseModel):
    """Category owned by a single user; titles are unique per user."""

    __tablename__ = "categories"
    __table_args__ = (UniqueConstraint("user_id", "title", name="uq_categories_user_title"),)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="categories")
    # Transactions outlive their category: the FK is ON DELETE SET NULL.
    transactions: Mapped[list["Transaction"]] = relationship(
        "Transaction",
        back_populates="category",
        passive_deletes=True,
        order_by="Transaction.created_at.desc()",
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, title={self.title}, user_id={self.user_id})>"

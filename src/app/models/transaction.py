"""Transaction model representing individual income/expense entries."""
from sqlalchemy import BigInteger, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel


class Transaction(BaseModel):
    """A signed money movement owned by a user and optionally categorized."""

    __tablename__ = "transactions"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    # Free-form tag, typically "income" or "expense"
    type: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    # Minor currency units (e.g. cents)
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="transactions")
    category: Mapped["Category | None"] = relationship("Category", back_populates="transactions")

    def __repr__(self) -> str:
        return f"<Transaction(id={self.id}, title={self.title}, amount={self.amount})>"

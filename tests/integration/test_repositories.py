"""Integration tests for repository layer."""
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.category import Category
from app.models.transaction import Transaction
from app.models.user import User
from app.repositories.category import CategoryRepository
from app.repositories.transaction import TransactionRepository
from app.repositories.user import UserRepository


async def add_transaction(
    db: AsyncSession,
    user: User,
    amount: int,
    type: str | None = "expense",
    category: Category | None = None,
    created_at: datetime | None = None,
    title: str = "Entry",
) -> Transaction:
    txn = Transaction(
        title=title,
        amount=amount,
        type=type,
        user_id=user.id,
        category_id=category.id if category else None,
    )
    if created_at is not None:
        txn.created_at = created_at
    db.add(txn)
    await db.commit()
    return txn


@pytest.fixture
async def food(db_session: AsyncSession, test_user: User) -> Category:
    return await CategoryRepository(db_session).create(Category(title="Food", user_id=test_user.id))


class TestUserRepository:
    async def test_create_and_get_by_email(self, db_session: AsyncSession):
        repo = UserRepository(db_session)
        created = await repo.create(User(email="new@example.com", password_hash="hashed"))

        assert created.id is not None
        assert created.created_at is not None

        found = await repo.get_by_email("new@example.com")
        assert found is not None
        assert found.id == created.id

    async def test_email_exists(self, db_session: AsyncSession, test_user: User):
        repo = UserRepository(db_session)

        assert await repo.email_exists(test_user.email) is True
        assert await repo.email_exists("nonexistent@example.com") is False

    async def test_get_by_email_missing(self, db_session: AsyncSession):
        assert await UserRepository(db_session).get_by_email("ghost@example.com") is None


class TestCategoryRepository:
    async def test_get_all_by_user_attaches_transactions(
        self, db_session: AsyncSession, test_user: User, other_user: User, food: Category
    ):
        repo = CategoryRepository(db_session)
        await repo.create(Category(title="Food", user_id=other_user.id))
        await add_transaction(db_session, test_user, 100, category=food)

        categories = await repo.get_all_by_user(test_user.id)

        assert [c.title for c in categories] == ["Food"]
        assert categories[0].user_id == test_user.id
        assert [t.amount for t in categories[0].transactions] == [100]

    async def test_get_by_title_is_scoped_to_user(
        self, db_session: AsyncSession, test_user: User, other_user: User, food: Category
    ):
        repo = CategoryRepository(db_session)

        assert (await repo.get_by_title(test_user.id, "Food")).id == food.id
        assert await repo.get_by_title(other_user.id, "Food") is None
        assert await repo.get_by_title(test_user.id, "Travel") is None

    async def test_title_unique_per_user_at_db_level(
        self, db_session: AsyncSession, test_user: User, food: Category
    ):
        db_session.add(Category(title="Food", user_id=test_user.id))

        with pytest.raises(IntegrityError):
            await db_session.commit()

    async def test_update_returns_affected_count(self, db_session: AsyncSession, food: Category):
        repo = CategoryRepository(db_session)

        assert await repo.update(food.id, {"title": "Groceries"}) == 1
        assert (await repo.get_by_id(food.id)).title == "Groceries"
        assert await repo.update(9999, {"title": "Nothing"}) == 0

    async def test_update_ignores_unknown_fields(self, db_session: AsyncSession, food: Category):
        assert await CategoryRepository(db_session).update(food.id, {"colour": "red"}) == 0

    async def test_update_never_changes_owner_or_id(
        self, db_session: AsyncSession, test_user: User, other_user: User, food: Category
    ):
        repo = CategoryRepository(db_session)

        affected = await repo.update(
            food.id, {"id": 500, "user_id": other_user.id, "title": "Groceries"}
        )

        assert affected == 1
        reloaded = await repo.get_by_id(food.id)
        assert reloaded.title == "Groceries"
        assert reloaded.user_id == test_user.id
        assert await repo.get_by_id(500) is None

    async def test_update_with_only_protected_fields_is_a_no_op(
        self, db_session: AsyncSession, other_user: User, food: Category
    ):
        assert await CategoryRepository(db_session).update(food.id, {"user_id": other_user.id}) == 0

    async def test_delete_returns_affected_count(self, db_session: AsyncSession, food: Category):
        repo = CategoryRepository(db_session)

        assert await repo.delete(food.id) == 1
        assert await repo.get_by_id(food.id) is None
        assert await repo.delete(food.id) == 0

    async def test_delete_keeps_transactions_uncategorized(
        self, db_session: AsyncSession, test_user: User, food: Category
    ):
        txn = await add_transaction(db_session, test_user, 100, category=food)

        await CategoryRepository(db_session).delete(food.id)

        reloaded = await TransactionRepository(db_session).get_by_id(txn.id)
        assert reloaded is not None
        assert reloaded.category_id is None
        assert reloaded.category is None

    async def test_get_owner_id(self, db_session: AsyncSession, test_user: User, food: Category):
        repo = CategoryRepository(db_session)

        assert await repo.get_owner_id(food.id) == test_user.id
        assert await repo.get_owner_id(9999) is None


class TestTransactionRepository:
    async def test_create_loads_category(
        self, db_session: AsyncSession, test_user: User, food: Category
    ):
        created = await TransactionRepository(db_session).create(
            Transaction(title="Lunch", amount=1250, type="expense", user_id=test_user.id, category_id=food.id)
        )

        assert created.id is not None
        assert created.category.title == "Food"

    async def test_get_by_user_newest_first(
        self, db_session: AsyncSession, test_user: User, other_user: User
    ):
        now = datetime.now(timezone.utc)
        await add_transaction(db_session, test_user, 1, title="old", created_at=now - timedelta(days=2))
        await add_transaction(db_session, test_user, 2, title="new", created_at=now)
        await add_transaction(db_session, test_user, 3, title="mid", created_at=now - timedelta(days=1))
        await add_transaction(db_session, other_user, 4, title="foreign")

        transactions = await TransactionRepository(db_session).get_by_user(test_user.id)

        assert [t.title for t in transactions] == ["new", "mid", "old"]

    async def test_get_page_by_user(self, db_session: AsyncSession, test_user: User):
        now = datetime.now(timezone.utc)
        for i in range(12):
            await add_transaction(
                db_session, test_user, i, title=f"t{i}", created_at=now + timedelta(minutes=i)
            )
        repo = TransactionRepository(db_session)

        first = await repo.get_page_by_user(test_user.id, skip=0, limit=10)
        second = await repo.get_page_by_user(test_user.id, skip=10, limit=10)

        assert len(first) == 10
        assert first[0].title == "t11"
        assert first[0].user.email == test_user.email
        assert [t.title for t in second] == ["t1", "t0"]

    async def test_sum_amount_by_type(
        self, db_session: AsyncSession, test_user: User, other_user: User
    ):
        await add_transaction(db_session, test_user, 100, type="expense")
        await add_transaction(db_session, test_user, 5000, type="income")
        await add_transaction(db_session, test_user, 42, type="expense")
        await add_transaction(db_session, other_user, 7, type="expense")
        repo = TransactionRepository(db_session)

        assert await repo.sum_amount_by_type(test_user.id, "expense") == 142
        assert await repo.sum_amount_by_type(test_user.id, "income") == 5000
        assert await repo.sum_amount_by_type(test_user.id, "transfer") == 0

    async def test_partial_update(self, db_session: AsyncSession, test_user: User):
        txn = await add_transaction(db_session, test_user, 100, title="Coffee")
        repo = TransactionRepository(db_session)

        assert await repo.update(txn.id, {"amount": 350}) == 1

        reloaded = await repo.get_by_id(txn.id)
        assert reloaded.amount == 350
        assert reloaded.title == "Coffee"

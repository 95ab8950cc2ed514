"""Data layer tests.

Covers the User and Special entities, their table models, and the
repositories against a real in-memory SQLite database.
"""

from decimal import Decimal
from unittest.mock import Mock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlmodel import Session, select

from src.specials_api.core.errors import RecordNotFoundError
from src.specials_api.entities import (
    Special,
    SpecialRepository,
    SpecialTable,
    User,
    UserRepository,
    UserTable,
)


class TestUserEntity:
    """Test User domain entity."""

    def test_user_creation(self):
        """Should generate id and timestamps."""
        user = User(email="john.doe@example.com", name="John")

        assert user.email == "john.doe@example.com"
        assert user.name == "John"
        assert user.id
        assert user.created_at is not None
        assert user.updated_at is not None

    def test_user_ids_are_unique(self):
        assert User(email="a@example.com").id != User(email="b@example.com").id

    def test_user_name_optional(self):
        assert User(email="x@example.com").name is None

    def test_user_serializes_camel_case(self):
        """JSON field names are camelCase."""
        data = User(email="x@example.com").model_dump(mode="json", by_alias=True)

        assert set(data) == {"id", "email", "name", "createdAt", "updatedAt"}

    def test_user_from_table_row(self):
        row = UserTable(email="row@example.com", name="Row")

        user = User.model_validate(row)

        assert user.id == row.id
        assert user.email == "row@example.com"


class TestSpecialEntity:
    """Test Special domain entity."""

    def test_special_defaults_active(self):
        special = Special(title="Soup", price=Decimal("4.50"))

        assert special.is_active is True
        assert special.description is None

    def test_special_accepts_camel_case_input(self):
        special = Special.model_validate(
            {"title": "Soup", "price": "4.50", "isActive": False}
        )

        assert special.is_active is False
        assert special.price == Decimal("4.50")

    def test_price_serializes_as_decimal_string(self):
        data = Special(title="Steak", price=Decimal("99.99")).model_dump(
            mode="json", by_alias=True
        )

        assert data["price"] == "99.99"
        assert data["isActive"] is True


class TestTables:
    """Test table models against the database."""

    def test_user_table_persistence(self, session: Session):
        row = UserTable(email="persist@example.com")
        session.add(row)
        session.commit()

        stored = session.exec(
            select(UserTable).where(UserTable.email == "persist@example.com")
        ).one()
        assert stored.id == row.id
        assert stored.name is None

    def test_user_email_is_unique(self, session: Session):
        session.add(UserTable(email="dup@example.com"))
        session.commit()

        session.add(UserTable(email="dup@example.com"))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

    def test_special_price_keeps_two_decimals(self, session: Session):
        row = SpecialTable(title="Pie", price=Decimal("10"))
        session.add(row)
        session.commit()
        session.refresh(row)

        assert row.price == Decimal("10.00")
        assert row.is_active is True


class TestUserRepository:
    """Test UserRepository with a real database."""

    def test_create_assigns_id_and_timestamps(self, user_repository: UserRepository):
        user = user_repository.create({"email": "new@example.com", "name": "New"})

        assert isinstance(user, User)
        assert user.id
        assert user.email == "new@example.com"
        assert user.name == "New"
        assert user.created_at is not None
        assert user.updated_at is not None

    def test_get(self, user_repository: UserRepository, make_user):
        row = make_user("get@example.com")

        assert user_repository.get(row.id).email == "get@example.com"
        assert user_repository.get("missing") is None

    def test_list_all_newest_first(self, user_repository: UserRepository, make_user):
        # Inserted out of order on purpose
        make_user("middle@example.com", minutes=5)
        make_user("oldest@example.com", minutes=0)
        make_user("newest@example.com", minutes=10)

        emails = [user.email for user in user_repository.list_all()]

        assert emails == [
            "newest@example.com",
            "middle@example.com",
            "oldest@example.com",
        ]

    def test_list_all_empty(self, user_repository: UserRepository):
        assert user_repository.list_all() == []

    def test_update_applies_only_given_fields(
        self, user_repository: UserRepository, make_user
    ):
        row = make_user("before@example.com", name="Keep Me")
        original_updated_at = row.updated_at

        user = user_repository.update(row.id, {"email": "after@example.com"})

        assert user.email == "after@example.com"
        assert user.name == "Keep Me"
        assert user.updated_at != original_updated_at

    def test_update_can_clear_optional_field(
        self, user_repository: UserRepository, make_user
    ):
        row = make_user("clear@example.com", name="Someone")

        assert user_repository.update(row.id, {"name": None}).name is None

    def test_update_missing_raises(self, user_repository: UserRepository):
        with pytest.raises(RecordNotFoundError) as exc_info:
            user_repository.update("missing", {"name": "x"})

        assert exc_info.value.entity == "User"
        assert exc_info.value.entity_id == "missing"

    def test_delete_returns_removed_user(
        self, user_repository: UserRepository, make_user
    ):
        row = make_user("gone@example.com")

        deleted = user_repository.delete(row.id)

        assert deleted.id == row.id
        assert user_repository.get(row.id) is None

    def test_delete_missing_raises(self, user_repository: UserRepository):
        with pytest.raises(RecordNotFoundError):
            user_repository.delete("missing")

    def test_duplicate_email_rolls_back_and_raises(
        self, user_repository: UserRepository, make_user
    ):
        make_user("taken@example.com")

        with pytest.raises(IntegrityError):
            user_repository.create({"email": "taken@example.com"})

        # Session is usable again after the rollback
        assert len(user_repository.list_all()) == 1

    def test_write_failure_rolls_back(self):
        session = Mock(spec=Session)
        session.commit.side_effect = OperationalError("COMMIT", {}, Exception("down"))
        repository = UserRepository(session)

        with pytest.raises(OperationalError):
            repository.create({"email": "x@example.com"})

        session.rollback.assert_called_once()


class TestSpecialRepository:
    """Test SpecialRepository with a real database."""

    def test_create_uses_store_default_for_is_active(
        self, special_repository: SpecialRepository
    ):
        special = special_repository.create({"title": "Soup", "price": 4.5})

        assert special.is_active is True
        assert special.price == Decimal("4.50")

    def test_create_inactive(self, special_repository: SpecialRepository):
        special = special_repository.create(
            {"title": "Off menu", "price": 1, "is_active": False}
        )

        assert special.is_active is False

    def test_list_all_newest_first(
        self, special_repository: SpecialRepository, make_special
    ):
        make_special("B", minutes=2)
        make_special("C", minutes=3)
        make_special("A", minutes=1)

        assert [s.title for s in special_repository.list_all()] == ["C", "B", "A"]

    def test_list_active_filters_and_orders(
        self, special_repository: SpecialRepository, make_special
    ):
        make_special("old active", minutes=1)
        make_special("inactive", is_active=False, minutes=2)
        make_special("new active", minutes=3)

        active = special_repository.list_active()

        assert [s.title for s in active] == ["new active", "old active"]
        assert all(s.is_active for s in active)

    def test_update_price(self, special_repository: SpecialRepository, make_special):
        row = make_special("Pasta", price="12.00")

        special = special_repository.update(row.id, {"price": 29.99})

        assert special.price == Decimal("29.99")
        assert special.title == "Pasta"

    def test_update_missing_raises(self, special_repository: SpecialRepository):
        with pytest.raises(RecordNotFoundError) as exc_info:
            special_repository.update("missing", {"title": "x"})

        assert exc_info.value.entity == "Special"

    def test_delete(self, special_repository: SpecialRepository, make_special):
        row = make_special("Gone")

        assert special_repository.delete(row.id).title == "Gone"
        assert special_repository.list_all() == []

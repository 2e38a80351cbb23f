"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from nutrition_diary.config import Settings
from nutrition_diary.containers import AppContainer
from nutrition_diary.domain.catalog import CatalogFood
from nutrition_diary.domain.errors import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
)
from nutrition_diary.domain.meals import MealEntry, MealEntryCommand
from nutrition_diary.domain.models import AuthSession
from nutrition_diary.services.auth import AuthProvider, AuthService
from nutrition_diary.services.catalog import FoodCatalog
from nutrition_diary.services.meals import MealLogService, MealRepository
from nutrition_diary.services.validation import MealEntryValidator

ALICE_TOKEN = "token-alice"
BOB_TOKEN = "token-bob"


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests.

    Timestamps advance by one second per insert so creation order is
    observable.
    """

    meals: dict[UUID, MealEntry] = field(default_factory=dict)
    clock: datetime = field(
        default_factory=lambda: datetime(2024, 3, 1, 8, 0, tzinfo=UTC)
    )
    fail_with: Exception | None = None

    def insert_meal(self, user_id: str, command: MealEntryCommand) -> MealEntry:
        self._maybe_fail()
        self.clock += timedelta(seconds=1)
        entry = MealEntry(
            id=uuid4(),
            user_id=user_id,
            entry_date=command.entry_date,
            meal_type=command.meal_type,
            description=command.description,
            grams=command.grams,
            nutrients=command.nutrients,
            created_at=self.clock,
        )
        self.meals[entry.id] = entry
        return entry

    def list_meals(self, user_id: str, entry_date: str) -> list[MealEntry]:
        self._maybe_fail()
        rows = [
            entry
            for entry in self.meals.values()
            if entry.user_id == user_id and entry.entry_date == entry_date
        ]
        return sorted(rows, key=lambda entry: entry.created_at)

    def delete_meal(self, user_id: str, meal_id: UUID) -> bool:
        self._maybe_fail()
        entry = self.meals.get(meal_id)
        if entry is None or entry.user_id != user_id:
            return False
        del self.meals[meal_id]
        return True

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with


@dataclass
class FakeAuthProvider(AuthProvider):
    """Fake auth provider keyed by email with static tokens."""

    accounts: dict[str, tuple[str, str]] = field(default_factory=dict)
    tokens: dict[str, str] = field(
        default_factory=lambda: {ALICE_TOKEN: "user-alice", BOB_TOKEN: "user-bob"}
    )

    def sign_up(self, email: str, password: str) -> AuthSession:
        key = email.lower()
        if key in self.accounts:
            raise EmailAlreadyRegisteredError
        user_id = f"user-{len(self.accounts) + 1}"
        self.accounts[key] = (user_id, password)
        return self._issue(user_id, email)

    def sign_in(self, email: str, password: str) -> AuthSession:
        account = self.accounts.get(email.lower())
        if account is None or account[1] != password:
            raise InvalidCredentialsError
        return self._issue(account[0], email)

    def get_user_id(self, token: str) -> str | None:
        return self.tokens.get(token)

    def _issue(self, user_id: str, email: str) -> AuthSession:
        token = f"token-{user_id}"
        self.tokens[token] = user_id
        return AuthSession(user_id=user_id, email=email, access_token=token)


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        foods_data_dir=str(tmp_path),
    )


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def auth_provider() -> FakeAuthProvider:
    return FakeAuthProvider()


@pytest.fixture
def meal_log_service(meal_repository: InMemoryMealRepository) -> MealLogService:
    return MealLogService(repository=meal_repository, validator=MealEntryValidator())


@pytest.fixture
def container(
    settings: Settings,
    meal_log_service: MealLogService,
    auth_provider: FakeAuthProvider,
) -> AppContainer:
    food_catalog = FoodCatalog(
        foods=[
            CatalogFood("Rice, white, cooked", 130.0, 2.7, 0.3, 28.2),
            CatalogFood("Apple", 52.0, 0.3, 0.2, 13.8),
            CatalogFood("Brown rice", 123.0, 2.7, 1.0, 25.6),
        ]
    )
    return AppContainer(
        settings=settings,
        auth_service=AuthService(auth_provider),
        meal_log_service=meal_log_service,
        food_catalog=food_catalog,
    )

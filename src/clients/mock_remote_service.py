import asyncio
import logging
from typing import Dict, List, Optional
from clients.key_value_store import InMemoryKeyValueStore
from clients.persistence_store import PersistenceStore
from models.errors import (
    AlreadyExistsError,
    DeleteFailedError,
    NotAuthorizedError,
    NotFoundError,
)
from models.models import (
    Book,
    BookDraft,
    BookStatus,
    User,
    books_from_records,
    to_record,
)
from utils.constants import (
    BOOKS_KEY,
    CURRENT_USER_ID_KEY,
    DEFAULT_LATENCY_MS,
    DEFAULT_RATING,
    SEED_BOOKS,
    SEED_USERS,
    USERS_KEY,
)

logger = logging.getLogger(__name__)


class MockRemoteService:
    """Stands in for the exchange API, backed by the local persistence store.

    Every call sleeps for its configured latency before touching the store,
    so callers see the same suspension points a remote service would give
    them.

    Users and books live in ``store``, which all browser sessions share. The
    signed-in user id lives in ``session_store``, which belongs to one browser
    session; each instance gets a private in-memory one unless given another.
    """

    def __init__(
        self,
        store: PersistenceStore,
        session_store: Optional[PersistenceStore] = None,
        latency_ms: Optional[Dict[str, float]] = None,
        latency_scale: float = 0.001,
    ):
        self.store = store
        self.session_store = session_store or PersistenceStore(
            InMemoryKeyValueStore()
        )
        self.latency_ms = {**DEFAULT_LATENCY_MS, **(latency_ms or {})}
        self.latency_scale = latency_scale
        self.store.initialize_if_absent(USERS_KEY, SEED_USERS)
        self.store.initialize_if_absent(BOOKS_KEY, SEED_BOOKS)

    async def _delay(self, operation: str) -> None:
        await asyncio.sleep(self.latency_ms[operation] * self.latency_scale)

    def _find_user_by_email(self, email: str) -> Optional[dict]:
        return self.store.find_one(USERS_KEY, lambda u: u.get("email") == email)

    def _create_user(self, name: str, email: str) -> User:
        record = self.store.create(
            USERS_KEY, {"name": name, "email": email, "rating": DEFAULT_RATING}
        )
        return User.model_validate(record)

    async def login(self, email: str) -> User:
        await self._delay("login")
        with self.store.transaction():
            record = self._find_user_by_email(email)
            if record:
                user = User.model_validate(record)
            else:
                user = self._create_user(email.split("@")[0], email)
                logger.info(f"Created user {user.id} on first login")
            self.session_store.set_scalar(CURRENT_USER_ID_KEY, user.id)
        logger.info(f"User {user.id} logged in")
        return user

    async def signup(self, name: str, email: str) -> User:
        await self._delay("signup")
        with self.store.transaction():
            if self._find_user_by_email(email):
                raise AlreadyExistsError(email)
            user = self._create_user(name, email)
            self.session_store.set_scalar(CURRENT_USER_ID_KEY, user.id)
        logger.info(f"User {user.id} signed up")
        return user

    async def logout(self) -> None:
        await self._delay("logout")
        self.session_store.delete_key(CURRENT_USER_ID_KEY)
        logger.info("Session cleared")

    async def get_current_user(self) -> Optional[User]:
        await self._delay("get_current_user")
        user_id = self.session_store.get_scalar(CURRENT_USER_ID_KEY)
        if not user_id:
            return None
        record = self.store.read_by_id(USERS_KEY, user_id)
        return User.model_validate(record) if record else None

    async def get_books(self) -> List[Book]:
        await self._delay("get_books")
        return books_from_records(self.store.read_all(BOOKS_KEY))

    async def create_book(self, draft: BookDraft, owner: User) -> Book:
        await self._delay("create_book")
        record = {
            **to_record(draft),
            "status": BookStatus.AVAILABLE.value,
            "owner": to_record(owner),
        }
        book = Book.model_validate(self.store.create(BOOKS_KEY, record))
        logger.info(f"Book {book.id} listed by {owner.id}")
        return book

    async def delete_book(self, book_id: str, requester_id: Optional[str]) -> None:
        await self._delay("delete_book")
        with self.store.transaction():
            record = self.store.read_by_id(BOOKS_KEY, book_id)
            if not record:
                raise NotFoundError(book_id)
            if record["owner"]["id"] != requester_id:
                raise NotAuthorizedError(book_id, requester_id)
            if not self.store.remove(BOOKS_KEY, book_id):
                raise DeleteFailedError(book_id)
        logger.info(f"Book {book_id} deleted by {requester_id}")

    async def get_books_by_owner(self, user_id: str) -> List[Book]:
        await self._delay("get_books_by_owner")
        return [
            book
            for book in books_from_records(self.store.read_all(BOOKS_KEY))
            if book.owner.id == user_id
        ]

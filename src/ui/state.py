from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional
from models.models import Book, Location, LocationStatus, User
from ui.views import Screen
from utils.constants import ALL_EXCHANGE_TYPES, Pages


class OverlayKind(Enum):
    BOOK_DETAILS = "book_details"
    ADD_BOOK = "add_book"


@dataclass
class Overlay:
    kind: OverlayKind
    book_id: Optional[str] = None


@dataclass
class AppState:
    """Everything one session knows: who is signed in, what was loaded, what is shown.

    ``current_user`` is None exactly when no session id is stored. ``books``
    holds the result of the last successful full fetch and is only replaced by
    another fetch or by a local removal after a delete.
    """

    current_user: Optional[User] = None
    books: List[Book] = field(default_factory=list)
    user_location: Optional[Location] = None
    location_status: LocationStatus = LocationStatus.INITIALIZING
    current_page: Pages = Pages.HOME
    is_loading: bool = True
    # bumped on every route change; widgets key their state on it
    page_entry: int = 0

    # home filters
    query: str = ""
    exchange_filter: str = ALL_EXCHANGE_TYPES

    # None while the owner-scoped fetch is in flight
    profile_books: Optional[List[Book]] = None

    overlay: Optional[Overlay] = None
    pending_delete: Optional[str] = None
    form_errors: Dict[str, str] = field(default_factory=dict)
    notices: List[str] = field(default_factory=list)
    screen: Screen = field(default_factory=Screen)

    def find_book(self, book_id: str) -> Optional[Book]:
        for book in [*self.books, *(self.profile_books or [])]:
            if book.id == book_id:
                return book
        return None

    def notify(self, message: str) -> None:
        self.notices.append(message)

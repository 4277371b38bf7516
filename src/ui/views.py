"""Toolkit-independent description of what is on screen.

The renderer fills these in from the session state; the Streamlit pages only
draw them.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union
from models.models import Book, Location, User
from utils.constants import ALL_EXCHANGE_TYPES, Message
from utils.geo_utils import distance_label


@dataclass(frozen=True)
class HeaderView:
    signed_in: bool
    welcome: Optional[str] = None


@dataclass(frozen=True)
class BookRowView:
    book_id: str
    title: str
    author: str
    exchange_type: str
    cover_image_url: Optional[str]
    initials: str
    owner_name: str
    owner_rating: float
    distance: Optional[str]
    can_delete: bool


@dataclass(frozen=True)
class HomeView:
    query: str
    exchange_filter: str
    location_status: str
    can_list_book: bool
    # None while the list is loading
    rows: Optional[List[BookRowView]] = None
    empty_message: str = Message.NO_BOOKS.value


@dataclass(frozen=True)
class ProfileView:
    name: str
    email: str
    rating: float
    rows: Optional[List[BookRowView]] = None
    empty_message: str = Message.NO_OWN_BOOKS.value


@dataclass(frozen=True)
class FormView:
    kind: str
    error: Optional[str] = None


@dataclass(frozen=True)
class LoadingView:
    pass


@dataclass(frozen=True)
class BookDetailView:
    book_id: str
    title: str
    author: str
    exchange_type: str
    description: str
    owner_name: str
    owner_rating: float
    distance: Optional[str]
    can_delete: bool


@dataclass(frozen=True)
class AddBookView:
    error: Optional[str] = None


@dataclass(frozen=True)
class ConfirmDeleteView:
    book_id: str
    title: str
    prompt: str = Message.CONFIRM_DELETE.value


PageView = Union[LoadingView, HomeView, ProfileView, FormView]
OverlayView = Union[BookDetailView, AddBookView]


@dataclass
class Screen:
    header: HeaderView = field(default_factory=lambda: HeaderView(signed_in=False))
    page: PageView = field(default_factory=LoadingView)
    overlay: Optional[OverlayView] = None
    confirm_delete: Optional[ConfirmDeleteView] = None


def filter_books(
    books: List[Book], query: str = "", exchange_type: str = ALL_EXCHANGE_TYPES
) -> List[Book]:
    """Case-insensitive substring match on title or author, AND the exchange type."""
    needle = query.lower()
    return [
        book
        for book in books
        if (exchange_type == ALL_EXCHANGE_TYPES or book.exchange_type.value == exchange_type)
        and (
            not needle
            or needle in book.title.lower()
            or needle in book.author.lower()
        )
    ]


def title_initials(title: str) -> str:
    return "".join(word[0] for word in title.split()[:2]).upper()


def build_row(
    book: Book, viewer: Optional[User], viewer_location: Optional[Location]
) -> BookRowView:
    return BookRowView(
        book_id=book.id,
        title=book.title,
        author=book.author,
        exchange_type=book.exchange_type.value,
        cover_image_url=book.cover_image_url or None,
        initials=title_initials(book.title),
        owner_name=book.owner.name,
        owner_rating=book.owner.rating,
        distance=distance_label(viewer_location, book.owner),
        can_delete=viewer is not None and viewer.id == book.owner.id,
    )


def build_detail(
    book: Book,
    viewer: Optional[User],
    viewer_location: Optional[Location],
) -> BookDetailView:
    return BookDetailView(
        book_id=book.id,
        title=book.title,
        author=book.author,
        exchange_type=book.exchange_type.value,
        description=book.description or Message.NO_DESCRIPTION.value,
        owner_name=book.owner.name,
        owner_rating=book.owner.rating,
        distance=distance_label(viewer_location, book.owner),
        can_delete=viewer is not None and viewer.id == book.owner.id,
    )

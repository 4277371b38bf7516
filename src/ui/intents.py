"""Discrete user actions the UI hands to the event handlers."""

from dataclasses import dataclass
from typing import Optional
from models.models import BookDraft


@dataclass(frozen=True)
class Navigate:
    target: str


@dataclass(frozen=True)
class SubmitLogin:
    email: str


@dataclass(frozen=True)
class SubmitSignup:
    name: str
    email: str


@dataclass(frozen=True)
class Logout:
    pass


@dataclass(frozen=True)
class SetFilters:
    query: str
    exchange_type: str


@dataclass(frozen=True)
class OpenBookDetails:
    book_id: str


@dataclass(frozen=True)
class OpenAddBook:
    pass


@dataclass(frozen=True)
class CloseOverlay:
    pass


@dataclass(frozen=True)
class ContactOwner:
    book_id: str


@dataclass(frozen=True)
class RequestDelete:
    book_id: str
    # False asks for confirmation first; the confirmation re-sends with True
    confirmed: bool = False


@dataclass(frozen=True)
class CancelDelete:
    pass


@dataclass(frozen=True)
class SubmitNewBook:
    title: str
    author: str
    exchange_type: str
    cover_image_url: Optional[str] = None
    description: Optional[str] = None

    def to_draft(self) -> BookDraft:
        return BookDraft(
            title=self.title.strip(),
            author=self.author.strip(),
            cover_image_url=(self.cover_image_url or "").strip() or None,
            exchange_type=self.exchange_type,
            description=(self.description or "").strip() or None,
        )


@dataclass(frozen=True)
class DismissNotices:
    pass


@dataclass(frozen=True)
class ActionResult:
    ok: bool
    error: Optional[str] = None

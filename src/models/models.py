from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ExchangeType(str, Enum):
    SWAP = "Swap"
    GIVE_AWAY = "GiveAway"
    SELL = "Sell"


class BookStatus(str, Enum):
    AVAILABLE = "Available"


class LocationStatus(Enum):
    INITIALIZING = "Initializing..."
    FOUND = "Location found"
    BLOCKED = "Location blocked"
    UNAVAILABLE = "Location unavailable"


class Location(BaseModel):
    lat: float
    lng: float


class User(BaseModel):
    id: str
    name: str
    email: str
    rating: float = 5.0
    location: Optional[Location] = None


class BookDraft(BaseModel):
    """Fields captured by the add-book form."""

    model_config = ConfigDict(populate_by_name=True)
    title: str
    author: str
    cover_image_url: Optional[str] = Field(default=None, alias="coverImageUrl")
    exchange_type: ExchangeType = Field(default=ExchangeType.SWAP, alias="exchangeType")
    description: Optional[str] = None


class Book(BookDraft):
    """A stored listing. `owner` is a copy of the user taken at creation time."""

    id: str
    status: BookStatus = BookStatus.AVAILABLE
    owner: User


def to_record(model: BaseModel) -> dict:
    """Serialize a model the way it is laid out in the key-value store."""
    return model.model_dump(mode="json", by_alias=True)


def books_from_records(records: List[dict]) -> List[Book]:
    return [Book.model_validate(record) for record in records]

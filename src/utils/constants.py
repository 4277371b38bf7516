from enum import Enum
from typing import Optional

USERS_KEY = "users"
BOOKS_KEY = "books"
CURRENT_USER_ID_KEY = "currentUserId"

DEFAULT_RATING = 5.0
FALLBACK_LOCATION = {"lat": 34.0522, "lng": -118.2437}

# Artificial per-call delay of the mock remote service, in milliseconds.
DEFAULT_LATENCY_MS = {
    "login": 500,
    "signup": 700,
    "logout": 200,
    "get_current_user": 100,
    "get_books": 600,
    "create_book": 400,
    "delete_book": 300,
    "get_books_by_owner": 500,
}

SEED_USERS = [
    {
        "id": "u1",
        "name": "Ravi",
        "email": "ravi@example.com",
        "rating": 4.7,
        "location": {"lat": 12.9716, "lng": 77.5946},
    },
    {
        "id": "u2",
        "name": "Meena",
        "email": "meena@example.com",
        "rating": 4.9,
        "location": {"lat": 13.0827, "lng": 80.2707},
    },
]

SEED_BOOKS = [
    {
        "id": "1",
        "title": "The Alchemist",
        "author": "Paulo Coelho",
        "coverImageUrl": "https://covers.openlibrary.org/b/id/12692298-L.jpg",
        "exchangeType": "Swap",
        "status": "Available",
        "description": "A fable about following your dream.",
        "owner": SEED_USERS[0],
    },
    {
        "id": "2",
        "title": "Clean Code",
        "author": "Robert C. Martin",
        "coverImageUrl": "https://covers.openlibrary.org/b/id/8233342-L.jpg",
        "exchangeType": "Sell",
        "status": "Available",
        "description": "A handbook of agile software craftsmanship.",
        "owner": SEED_USERS[1],
    },
    {
        "id": "3",
        "title": "Sapiens",
        "author": "Yuval Noah Harari",
        "coverImageUrl": "https://covers.openlibrary.org/b/id/10332812-L.jpg",
        "exchangeType": "GiveAway",
        "status": "Available",
        "description": "A brief history of humankind.",
        "owner": SEED_USERS[0],
    },
]

ALL_EXCHANGE_TYPES = "All"


class Label(Enum):
    SEARCH = "Search by title or author..."
    EXCHANGE_TYPE = "Exchange type"
    TITLE = "Title"
    AUTHOR = "Author"
    COVER_URL = "Cover Image URL (Optional)"
    DESCRIPTION = "Description"
    NAME = "Full Name"
    EMAIL = "Email"
    MANDATORY_FIELD_MARKER = "*"


class Message(Enum):
    NO_BOOKS = "No books found."
    NO_OWN_BOOKS = "You haven't listed any books yet."
    NO_DESCRIPTION = "No description provided."
    LOGIN_FAILED = "Failed to login."
    DELETE_FAILED = "Could not delete the book."
    DELETE_AUTH_REQUIRED = "You must be logged in to delete a listing."
    LIST_AUTH_REQUIRED = "You must be logged in to list a book."
    CONFIRM_DELETE = "Are you sure you want to delete this listing?"


class Pages(Enum):
    HOME = {"key": "", "title": "Home"}
    LOGIN = {"key": "login", "title": "Login"}
    SIGNUP = {"key": "signup", "title": "Sign Up"}
    PROFILE = {"key": "profile", "title": "Profile"}

    @property
    def key(self) -> str:
        return self.value["key"]

    @classmethod
    def from_key(cls, key: str) -> Optional["Pages"]:
        return next((page for page in cls if page.key == key), None)

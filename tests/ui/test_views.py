import pytest

from models.models import Book, Location, User, books_from_records
from ui.views import build_detail, build_row, filter_books, title_initials
from utils.constants import SEED_BOOKS

BOOKS = books_from_records(SEED_BOOKS)
RAVI = BOOKS[0].owner
MEENA = BOOKS[1].owner


def _titles(books):
    return [b.title for b in books]


@pytest.mark.parametrize(
    "query, exchange_type, expected",
    [
        ("", "All", ["The Alchemist", "Clean Code", "Sapiens"]),
        ("alchemist", "Swap", ["The Alchemist"]),
        ("clean", "Swap", []),
        ("CLEAN", "All", ["Clean Code"]),
        ("harari", "All", ["Sapiens"]),
        ("robert c", "Sell", ["Clean Code"]),
        ("", "GiveAway", ["Sapiens"]),
        ("o", "All", ["The Alchemist", "Clean Code", "Sapiens"]),
        ("zzz", "All", []),
    ],
)
def test_filter_books(query, exchange_type, expected):
    assert _titles(filter_books(BOOKS, query, exchange_type)) == expected


def test_filter_books_keeps_snapshot_untouched():
    filter_books(BOOKS, "clean", "Sell")
    assert len(BOOKS) == 3


def test_title_initials():
    assert title_initials("The Alchemist") == "TA"
    assert title_initials("sapiens") == "S"
    assert title_initials("a brief history of time") == "AB"


def test_build_row_for_owner_with_location():
    row = build_row(BOOKS[0], RAVI, Location(lat=12.9716, lng=77.5946))
    assert row.owner_name == "Ravi"
    assert row.owner_rating == 4.7
    assert row.distance == "0m away"
    assert row.can_delete is True
    assert row.cover_image_url.startswith("https://covers.openlibrary.org")


def test_build_row_for_stranger_without_location():
    row = build_row(BOOKS[0], MEENA, None)
    assert row.distance is None
    assert row.can_delete is False
    assert build_row(BOOKS[0], None, None).can_delete is False


def test_build_row_owner_without_location():
    book = Book(
        id="9",
        title="No Map",
        author="Someone",
        owner=User(id="u9", name="Nomad", email="n@x.io"),
    )
    row = build_row(book, None, Location(lat=0, lng=0))
    assert row.distance is None
    assert row.cover_image_url is None
    assert row.initials == "NM"


def test_build_detail_defaults_description():
    book = BOOKS[1].model_copy(update={"description": None})
    detail = build_detail(book, MEENA, None)
    assert detail.description == "No description provided."
    assert detail.can_delete is True

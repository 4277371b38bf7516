"""Errors raised by the exchange service and the UI actions."""


class BookSwapError(Exception):
    """Base class for every failure an action can surface to the user."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AlreadyExistsError(BookSwapError):
    """Raised when signing up with an email that is already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("User already exists.")


class NotFoundError(BookSwapError):
    """Raised when a book targeted for deletion does not exist."""

    def __init__(self, book_id: str) -> None:
        self.book_id = book_id
        super().__init__("Book not found.")


class NotAuthorizedError(BookSwapError):
    """Raised when someone other than the owner tries to delete a listing."""

    def __init__(self, book_id: str, requester_id: str | None) -> None:
        self.book_id = book_id
        self.requester_id = requester_id
        super().__init__("Not authorized.")


class DeleteFailedError(BookSwapError):
    """Raised when the store reports that nothing was removed."""

    def __init__(self, book_id: str) -> None:
        self.book_id = book_id
        super().__init__("Failed to delete.")


class AuthRequiredError(BookSwapError):
    def __init__(self, message: str = "You must be logged in to do that.") -> None:
        super().__init__(message)


class ValidationRequiredError(BookSwapError):
    """Raised by client-side form checks, before any service call."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"{field} is required.")


class LocationDeniedError(BookSwapError):
    def __init__(self) -> None:
        super().__init__("Location permission denied.")

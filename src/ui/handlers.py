import logging
from typing import Awaitable, Callable, Dict, Type
from clients.mock_remote_service import MockRemoteService
from models.errors import (
    AuthRequiredError,
    BookSwapError,
    ValidationRequiredError,
)
from models.models import ExchangeType
from ui.intents import (
    ActionResult,
    CancelDelete,
    CloseOverlay,
    ContactOwner,
    DismissNotices,
    Logout,
    Navigate,
    OpenAddBook,
    OpenBookDetails,
    RequestDelete,
    SetFilters,
    SubmitLogin,
    SubmitNewBook,
    SubmitSignup,
)
from ui.renderer import ADD_BOOK_FORM, ViewRenderer
from ui.router import Router
from ui.state import AppState, Overlay, OverlayKind
from utils.constants import Message, Pages

logger = logging.getLogger(__name__)


def _require_email(email: str) -> str:
    email = (email or "").strip()
    if not email:
        raise ValidationRequiredError("Email")
    local, at, domain = email.partition("@")
    if not local or not at or not domain:
        raise ValidationRequiredError("Email", "Please enter a valid email address.")
    return email


def _require(value: str | None, field: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationRequiredError(field)
    return value


class EventHandlers:
    """Runs user intents against the service and the session state.

    Failures never escape ``dispatch``: they end up as an inline form error
    or a notice on the state, and in the returned ActionResult.
    """

    def __init__(
        self,
        state: AppState,
        service: MockRemoteService,
        router: Router,
        renderer: ViewRenderer,
    ):
        self.state = state
        self.service = service
        self.router = router
        self.renderer = renderer
        self._table: Dict[Type, Callable[..., Awaitable[ActionResult]]] = {
            Navigate: self.navigate,
            SubmitLogin: self.submit_login,
            SubmitSignup: self.submit_signup,
            Logout: self.logout,
            SetFilters: self.set_filters,
            OpenBookDetails: self.open_book_details,
            OpenAddBook: self.open_add_book,
            CloseOverlay: self.close_overlay,
            ContactOwner: self.contact_owner,
            RequestDelete: self.delete_book,
            CancelDelete: self.cancel_delete,
            SubmitNewBook: self.submit_new_book,
            DismissNotices: self.dismiss_notices,
        }

    async def dispatch(self, intent) -> ActionResult:
        handler = self._table.get(type(intent))
        if handler is None:
            raise TypeError(f"No handler for {type(intent).__name__}")
        logger.debug(f"Dispatching {intent!r}")
        return await handler(intent)

    async def navigate(self, intent: Navigate) -> ActionResult:
        self.renderer.close_overlay()
        await self.router.navigate(intent.target)
        return ActionResult(ok=True)

    async def submit_login(self, intent: SubmitLogin) -> ActionResult:
        try:
            email = _require_email(intent.email)
        except ValidationRequiredError as e:
            return self._form_error("login", Pages.LOGIN, e.message)
        try:
            self.state.current_user = await self.service.login(email)
        except BookSwapError as e:
            logger.warning(f"Login failed: {e}")
            return self._form_error("login", Pages.LOGIN, Message.LOGIN_FAILED.value)
        await self.router.navigate(Pages.HOME)
        return ActionResult(ok=True)

    async def submit_signup(self, intent: SubmitSignup) -> ActionResult:
        try:
            name = _require(intent.name, "Name")
            email = _require_email(intent.email)
            self.state.current_user = await self.service.signup(name, email)
        except BookSwapError as e:
            logger.warning(f"Signup failed: {e}")
            return self._form_error("signup", Pages.SIGNUP, e.message)
        await self.router.navigate(Pages.HOME)
        return ActionResult(ok=True)

    def _form_error(self, kind: str, page: Pages, message: str) -> ActionResult:
        self.state.form_errors[kind] = message
        self.renderer.paint_form(page)
        return ActionResult(ok=False, error=message)

    async def logout(self, intent: Logout) -> ActionResult:
        await self.service.logout()
        self.state.current_user = None
        self.state.pending_delete = None
        self.renderer.close_overlay()
        await self.router.navigate(Pages.HOME)
        return ActionResult(ok=True)

    async def set_filters(self, intent: SetFilters) -> ActionResult:
        self.state.query = intent.query
        self.state.exchange_filter = intent.exchange_type
        self.renderer.paint_home()
        return ActionResult(ok=True)

    async def open_book_details(self, intent: OpenBookDetails) -> ActionResult:
        self.renderer.open_overlay(Overlay(OverlayKind.BOOK_DETAILS, intent.book_id))
        return ActionResult(ok=self.state.overlay is not None)

    async def open_add_book(self, intent: OpenAddBook) -> ActionResult:
        if self.state.current_user is None:
            return self._notice(AuthRequiredError(Message.LIST_AUTH_REQUIRED.value))
        self.renderer.open_overlay(Overlay(OverlayKind.ADD_BOOK))
        return ActionResult(ok=True)

    async def close_overlay(self, intent: CloseOverlay) -> ActionResult:
        self.renderer.close_overlay()
        return ActionResult(ok=True)

    async def contact_owner(self, intent: ContactOwner) -> ActionResult:
        book = self.state.find_book(intent.book_id)
        if book:
            self.state.notify(f"Contacting {book.owner.name}...")
        return ActionResult(ok=book is not None)

    async def delete_book(self, intent: RequestDelete) -> ActionResult:
        viewer = self.state.current_user
        if viewer is None:
            return self._notice(AuthRequiredError(Message.DELETE_AUTH_REQUIRED.value))
        if not intent.confirmed:
            self.state.pending_delete = intent.book_id
            self.renderer.paint_confirm()
            return ActionResult(ok=False)
        self.state.pending_delete = None
        self.renderer.paint_confirm()
        try:
            await self.service.delete_book(intent.book_id, viewer.id)
        except BookSwapError as e:
            logger.warning(f"Delete of book {intent.book_id} failed: {e}")
            return self._notice(e)
        self.state.books = [b for b in self.state.books if b.id != intent.book_id]
        if self.state.profile_books is not None:
            self.state.profile_books = [
                b for b in self.state.profile_books if b.id != intent.book_id
            ]
        overlay = self.state.overlay
        if overlay and overlay.book_id == intent.book_id:
            self.renderer.close_overlay()
        if self.state.current_page is Pages.PROFILE:
            await self.renderer.enter_profile()
        else:
            self.renderer.paint_home()
        return ActionResult(ok=True)

    async def cancel_delete(self, intent: CancelDelete) -> ActionResult:
        self.state.pending_delete = None
        self.renderer.paint_confirm()
        return ActionResult(ok=True)

    async def submit_new_book(self, intent: SubmitNewBook) -> ActionResult:
        user = self.state.current_user
        try:
            if user is None:
                raise AuthRequiredError(Message.LIST_AUTH_REQUIRED.value)
            _require(intent.title, "Title")
            _require(intent.author, "Author")
            if intent.exchange_type not in {t.value for t in ExchangeType}:
                raise ValidationRequiredError("Exchange type")
        except BookSwapError as e:
            self.state.form_errors[ADD_BOOK_FORM] = e.message
            self.renderer.paint_overlay()
            return ActionResult(ok=False, error=e.message)

        owner = user.model_copy(
            update={"location": self.state.user_location or user.location}
        )
        await self.service.create_book(intent.to_draft(), owner)
        self.renderer.close_overlay()
        await self.renderer.reload_list()
        return ActionResult(ok=True)

    async def dismiss_notices(self, intent: DismissNotices) -> ActionResult:
        self.state.notices.clear()
        return ActionResult(ok=True)

    def _notice(self, error: BookSwapError) -> ActionResult:
        message = error.message or Message.DELETE_FAILED.value
        self.state.notify(message)
        return ActionResult(ok=False, error=message)

import logging
from clients.mock_remote_service import MockRemoteService
from ui.router import Router
from ui.state import AppState, Overlay, OverlayKind
from ui.views import (
    AddBookView,
    ConfirmDeleteView,
    FormView,
    HeaderView,
    HomeView,
    LoadingView,
    ProfileView,
    build_detail,
    build_row,
    filter_books,
)
from utils.constants import ALL_EXCHANGE_TYPES, Pages

logger = logging.getLogger(__name__)

FORM_PAGES = {Pages.LOGIN: "login", Pages.SIGNUP: "signup"}
ADD_BOOK_FORM = "add_book"


class ViewRenderer:
    """Keeps ``state.screen`` in step with the session state.

    Page entry paints a skeleton right away, then awaits the page's data.
    Fetched data is only painted if its page is still the current one when
    the fetch completes; otherwise the result is dropped.
    """

    def __init__(self, state: AppState, service: MockRemoteService, router: Router):
        self.state = state
        self.service = service
        self.router = router
        self.books_loading = False
        router.attach(self.show_page)

    async def show_page(self, page: Pages) -> None:
        self.paint_header()
        if page is Pages.HOME:
            await self.enter_home()
        elif page is Pages.PROFILE:
            await self.enter_profile()
        elif page in FORM_PAGES:
            self.state.form_errors.pop(FORM_PAGES[page], None)
            self.paint_form(page)

    def paint_header(self) -> None:
        user = self.state.current_user
        self.state.screen.header = HeaderView(
            signed_in=user is not None,
            welcome=f"Welcome, {user.name}!" if user else None,
        )

    # home

    async def enter_home(self) -> None:
        self.state.query = ""
        self.state.exchange_filter = ALL_EXCHANGE_TYPES
        self.books_loading = True
        self.paint_home()
        try:
            books = await self.service.get_books()
        finally:
            self.books_loading = False
        self.state.books = books
        if self.state.current_page is not Pages.HOME:
            logger.debug("Discarding book list fetched after leaving home")
            return
        self.paint_home()

    def paint_home(self) -> None:
        if self.state.current_page is not Pages.HOME:
            return
        rows = None
        if not self.books_loading:
            rows = [
                build_row(book, self.state.current_user, self.state.user_location)
                for book in filter_books(
                    self.state.books, self.state.query, self.state.exchange_filter
                )
            ]
        self.state.screen.page = HomeView(
            query=self.state.query,
            exchange_filter=self.state.exchange_filter,
            location_status=self.state.location_status.value,
            can_list_book=self.state.current_user is not None,
            rows=rows,
        )

    # profile

    async def enter_profile(self) -> None:
        user = self.state.current_user
        if user is None:
            await self.router.navigate(Pages.LOGIN)
            return
        self.state.profile_books = None
        self.paint_profile()
        books = await self.service.get_books_by_owner(user.id)
        current = self.state.current_user
        if (
            self.state.current_page is not Pages.PROFILE
            or current is None
            or current.id != user.id
        ):
            logger.debug("Discarding profile books fetched after leaving profile")
            return
        self.state.profile_books = books
        self.paint_profile()

    def paint_profile(self) -> None:
        user = self.state.current_user
        if self.state.current_page is not Pages.PROFILE or user is None:
            return
        rows = None
        if self.state.profile_books is not None:
            rows = [
                build_row(book, user, self.state.user_location)
                for book in self.state.profile_books
            ]
        self.state.screen.page = ProfileView(
            name=user.name, email=user.email, rating=user.rating, rows=rows
        )

    # forms

    def paint_form(self, page: Pages) -> None:
        if self.state.current_page is not page:
            return
        kind = FORM_PAGES[page]
        self.state.screen.page = FormView(
            kind=kind, error=self.state.form_errors.get(kind)
        )

    # overlays

    def open_overlay(self, overlay: Overlay) -> None:
        self.state.overlay = overlay
        self.state.form_errors.pop(ADD_BOOK_FORM, None)
        self.paint_overlay()

    def close_overlay(self) -> None:
        self.state.overlay = None
        self.paint_overlay()

    def paint_overlay(self) -> None:
        overlay = self.state.overlay
        if overlay is None:
            self.state.screen.overlay = None
        elif overlay.kind is OverlayKind.ADD_BOOK:
            self.state.screen.overlay = AddBookView(
                error=self.state.form_errors.get(ADD_BOOK_FORM)
            )
        else:
            book = self.state.find_book(overlay.book_id or "")
            if book is None:
                self.state.overlay = None
                self.state.screen.overlay = None
                return
            self.state.screen.overlay = build_detail(
                book, self.state.current_user, self.state.user_location
            )

    def paint_confirm(self) -> None:
        book_id = self.state.pending_delete
        book = self.state.find_book(book_id) if book_id else None
        self.state.screen.confirm_delete = (
            ConfirmDeleteView(book_id=book.id, title=book.title) if book else None
        )

    # whole screen

    def paint_list(self) -> None:
        if self.state.current_page is Pages.PROFILE:
            self.paint_profile()
        else:
            self.paint_home()

    async def reload_list(self) -> None:
        """Re-fetch and repaint whichever book list is on screen."""
        if self.state.current_page is Pages.PROFILE:
            await self.enter_profile()
            return
        self.books_loading = True
        self.paint_home()
        try:
            books = await self.service.get_books()
        finally:
            self.books_loading = False
        self.state.books = books
        self.paint_home()

    def refresh(self) -> None:
        """Repaint from state without fetching, e.g. once the location arrives."""
        self.paint_header()
        page = self.state.current_page
        if page in FORM_PAGES:
            self.paint_form(page)
        else:
            self.paint_list()
        self.paint_overlay()
        self.paint_confirm()

    def show_loading(self) -> None:
        self.state.screen.page = LoadingView()

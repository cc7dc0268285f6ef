"""
controller.py - Command handlers behind the UI
Single responsibility: translate user commands into store / presenter /
sync calls so the UI only binds buttons to methods.
"""
import logging
from typing import Callable

from quotebox import config
from quotebox.domain.models import Quote, SyncReport
from quotebox.services import transfer_service
from quotebox.services.category_index import CategoryIndex
from quotebox.services.presenter import DisplaySurface, Presenter
from quotebox.services.quote_store import QuoteStore
from quotebox.services.sync_service import RemoteQuoteClient, SyncAgent
from quotebox.storage.kv import DurableStore, SessionStore

logger = logging.getLogger(__name__)


class QuoteController:
    def __init__(
        self,
        store: QuoteStore,
        index: CategoryIndex,
        presenter: Presenter,
        sync: SyncAgent,
        sync_on_change: bool = config.SYNC_ON_CHANGE,
    ):
        self.store = store
        self.index = index
        self.presenter = presenter
        self.sync = sync
        self.sync_on_change = sync_on_change
        self._on_changed: list[Callable[[], None]] = []
        self.sync.add_listener(self._handle_synced)

    def on_changed(self, callback: Callable[[], None]) -> None:
        """Register a callback for collection changes (categories refresh)."""
        self._on_changed.append(callback)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def quotes(self) -> list[Quote]:
        return self.store.quotes

    def categories(self) -> list[str]:
        return self.index.categories(self.store.quotes)

    def filter_options(self) -> list[str]:
        return self.index.options(self.store.quotes)

    def selected_filter(self) -> str:
        return self.index.selected_filter()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def show_next(self) -> Quote | None:
        return self.presenter.show_random(self.store.quotes, self.index.selected_filter())

    def restore(self) -> Quote | None:
        last = self.presenter.last_viewed()
        if last is None:
            return self.show_next()
        self.presenter.render(last)
        return last

    def change_filter(self, value: str | None) -> Quote | None:
        self.index.set_filter(value)
        return self.show_next()

    def add_quote(self, text: str, category: str) -> Quote:
        """Raises ValidationError; the collection is unchanged in that case."""
        quote = self.store.add(text, category)
        self._changed()
        self._maybe_sync()
        return quote

    def export_bytes(self) -> bytes:
        return transfer_service.export_json(self.store.quotes)

    def export_to(self, path: str) -> str:
        return transfer_service.write_export(self.store.quotes, path)

    def import_bytes(self, data: bytes | str) -> list[Quote]:
        """Raises ParseError; the collection is unchanged in that case."""
        quotes = transfer_service.import_into(self.store, data)
        self._changed()
        self._maybe_sync()
        return quotes

    def import_from(self, path: str) -> list[Quote]:
        return self.import_bytes(transfer_service.read_import(path))

    def sync_now(self) -> SyncReport:
        return self.sync.sync_now()

    # ------------------------------------------------------------------

    def _maybe_sync(self) -> None:
        if self.sync_on_change:
            self.sync.trigger()

    def _handle_synced(self, report: SyncReport) -> None:
        if report.ok:
            self._changed()

    def _changed(self) -> None:
        for callback in list(self._on_changed):
            try:
                callback()
            except Exception:
                logger.exception("Change listener failed")


def build_controller(
    surface: DisplaySurface,
    db_path: str | None = None,
    endpoint: str | None = None,
) -> QuoteController:
    """Wire the default stores and services around a display surface."""
    durable = DurableStore(db_path)
    session = SessionStore()
    store = QuoteStore(durable)
    client = RemoteQuoteClient(endpoint or config.REMOTE_ENDPOINT)
    return QuoteController(
        store=store,
        index=CategoryIndex(durable),
        presenter=Presenter(surface, session),
        sync=SyncAgent(store, client),
    )

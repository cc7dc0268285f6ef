"""
sync_service.py - Remote reconciliation
Single responsibility: pull the remote collection over the local one, push
the result back, and run that on a schedule.

Remote always wins: a successful fetch replaces the local collection, so
quotes added locally since the last sync are discarded unless the remote
already has them. There is no merge or conflict detection.
"""
import logging
import sqlite3
import threading
from typing import Callable

import requests

from quotebox import config
from quotebox.domain.errors import NetworkError
from quotebox.domain.models import Quote, SyncReport
from quotebox.services.quote_store import QuoteStore
from quotebox.utils.time import now_iso

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------


class RemoteQuoteClient:
    """REST collection: GET returns [{title, body, ...}], POST creates one."""

    def __init__(
        self,
        endpoint: str = config.REMOTE_ENDPOINT,
        session: requests.Session | None = None,
        timeout: float = config.HTTP_TIMEOUT_SECONDS,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.headers.update(config.HTTP_HEADERS)
        self.session = session

    def fetch_all(self) -> list[dict]:
        try:
            resp = self.session.get(self.endpoint, timeout=self.timeout)
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as e:
            raise NetworkError(f"GET {self.endpoint} failed: {e}") from e
        except ValueError as e:
            raise NetworkError(f"GET {self.endpoint} returned invalid JSON: {e}") from e
        if not isinstance(payload, list):
            raise NetworkError(f"GET {self.endpoint} did not return an array")
        return payload

    def create(self, quote: Quote) -> None:
        try:
            resp = self.session.post(
                self.endpoint, json=quote.to_dict(), timeout=self.timeout
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"POST {self.endpoint} failed: {e}") from e


def quote_from_remote(record: dict) -> Quote:
    return Quote(
        text=str(record.get("body") or ""),
        category=str(record.get("title") or ""),
    )


# ---------------------------------------------------------------------------
# Sync agent
# ---------------------------------------------------------------------------


class SyncAgent:
    def __init__(
        self,
        store: QuoteStore,
        client: RemoteQuoteClient,
        interval: float = config.SYNC_INTERVAL_SECONDS,
    ):
        self.store = store
        self.client = client
        self.interval = interval
        self.last_report: SyncReport | None = None
        self._in_flight = threading.Lock()
        self._stop = threading.Event()
        self._timer_thread: threading.Thread | None = None
        self._listeners: list[Callable[[SyncReport], None]] = []

    def add_listener(self, callback: Callable[[SyncReport], None]) -> None:
        self._listeners.append(callback)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def fetch_remote(self) -> list[Quote]:
        records = self.client.fetch_all()
        quotes = []
        for record in records:
            if not isinstance(record, dict):
                logger.debug("Skipping non-object remote record: %r", record)
                continue
            quotes.append(quote_from_remote(record))
        return quotes

    def reconcile(self) -> list[Quote]:
        """Replace the local collection with the remote one. Raises NetworkError or sqlite3.Error."""
        remote = self.fetch_remote()
        self.store.replace_all(remote)
        return remote

    def push_local(self, quotes: list[Quote]) -> tuple[int, int]:
        """POST each quote in turn; one failure does not stop the rest."""
        pushed = failed = 0
        for quote in quotes:
            try:
                self.client.create(quote)
                pushed += 1
            except NetworkError as e:
                failed += 1
                logger.warning("Failed to push quote (category=%s): %s", quote.category, e)
        return pushed, failed

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------

    def sync_now(self) -> SyncReport:
        if not self._in_flight.acquire(blocking=False):
            logger.info("Sync already in progress; skipping")
            return SyncReport(skipped=True, finished_at=now_iso())

        try:
            report = SyncReport()
            try:
                remote = self.reconcile()
            except NetworkError as e:
                logger.warning("Sync fetch failed, keeping local quotes: %s", e)
                report.error = str(e)
            except sqlite3.Error as e:
                logger.exception("Sync could not save remote quotes")
                report.error = f"Could not save quotes: {e}"
            else:
                report.fetched = len(remote)
                report.pushed, report.failed = self.push_local(remote)
                logger.info(
                    "Sync finished: fetched=%d pushed=%d failed=%d",
                    report.fetched,
                    report.pushed,
                    report.failed,
                )
            report.finished_at = now_iso()
            self.last_report = report
        finally:
            self._in_flight.release()

        self._notify(report)
        return report

    def trigger(self) -> threading.Thread:
        """Run one sync on a background thread."""
        t = threading.Thread(target=self.sync_now, name="quote-sync", daemon=True)
        t.start()
        return t

    @property
    def in_progress(self) -> bool:
        return self._in_flight.locked()

    def _notify(self, report: SyncReport) -> None:
        for callback in list(self._listeners):
            try:
                callback(report)
            except Exception:
                logger.exception("Sync listener failed")

    # ------------------------------------------------------------------
    # 定期実行
    # ------------------------------------------------------------------

    def start(self) -> None:
        if self._timer_thread and self._timer_thread.is_alive():
            return
        self._stop.clear()

        def _loop():
            while not self._stop.wait(self.interval):
                logger.debug("Scheduled sync tick")
                try:
                    self.sync_now()
                except Exception:
                    logger.exception("Scheduled sync failed")

        self._timer_thread = threading.Thread(target=_loop, name="quote-sync-timer", daemon=True)
        self._timer_thread.start()
        logger.info("Scheduled sync every %s seconds", self.interval)

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        if self._timer_thread:
            self._timer_thread.join(timeout)
            self._timer_thread = None

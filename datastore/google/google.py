import asyncio
from typing import Any, List, Mapping, Optional, Union

import httpx

from datastore.data_store import DataStore
from datastore.data_table import DataTable
from datastore.error import FetchError
from datastore.events import DataStoreEvent
from datastore.google.google_columns import get_headers, get_sheet_columns
from datastore.google.google_utils import fetch_json, get_feed_url
from datastore.pattern.cell_value import Columns
from datastore.pattern.sheet_options import SheetOptions
from utils.gds_logger import get_logger

logger = get_logger()


class GoogleDataStore(DataStore):
    """
    Loads a public Google spreadsheet through its JSON cell feed.

    A load cycle fires, in order: `load` (json, enable_polling, data_refresh_rate),
    `parse` (json), `afterParse` (columns) and `afterLoad` (table). A failed request
    fires `fail` (text, error) instead. Calling `event.prevent_default()` in a
    `load` or `parse` listener stops the cycle after that event.
    """

    default_options = SheetOptions(google_spreadsheet_key="")

    def __init__(
        self,
        table: Optional[DataTable] = None,
        options: Optional[Union[SheetOptions, Mapping[str, Any]]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(table, options)
        self.columns: Columns = []
        # A fake HTTP client can be passed in tests.
        self._client = client
        self._poll_handle: Optional[asyncio.TimerHandle] = None
        self._poll_task: Optional[asyncio.Future] = None
        self._polling_stopped = False

    @property
    def url(self) -> str:
        return get_feed_url(self.options)

    @property
    def is_polling(self) -> bool:
        return self._poll_handle is not None or (self._poll_task is not None and not self._poll_task.done())

    async def load(self) -> None:
        if not self.options.google_spreadsheet_key:
            logger.debug("No spreadsheet key configured, nothing to load")
            return None
        self._polling_stopped = False
        await self.fetch_sheet()

    def stop_polling(self):
        self._polling_stopped = True
        if self._poll_handle is not None:
            self._poll_handle.cancel()
            self._poll_handle = None
        if self._poll_task is not None and not self._poll_task.done():
            self._poll_task.cancel()
        self._poll_task = None

    async def fetch_sheet(self) -> None:
        url = self.url
        logger.info(f"Fetching worksheet {self.options.worksheet} of {self.options.google_spreadsheet_key}")
        try:
            json = await fetch_json(url, self._client)
        except FetchError as e:
            logger.warning(e.reason)
            self.fire_event("fail", {"text": e.reason, "error": e})
            return

        self.fire_event(
            "load",
            {
                "json": json,
                "enable_polling": self.options.enable_polling,
                "data_refresh_rate": self.options.data_refresh_rate,
            },
            self._on_load,
        )

    def _on_load(self, event: DataStoreEvent):
        json = event["json"]
        if not get_feed_entries(json):
            logger.info("The worksheet feed has no cells")
            self._schedule_next_fetch()
            return
        if not self.parse_sheet(json):
            return

        headers = get_headers(self.columns)
        table = DataTable.from_columns(self.columns, headers)
        self.table = table
        logger.debug(f"Built table with {len(headers)} columns and {table.row_count} rows")

        self._schedule_next_fetch()
        self.fire_event("afterLoad", {"table": table})

    def parse_sheet(self, json: Any) -> bool:
        entries = get_feed_entries(json)
        if not entries:
            return False

        def build_columns(event: DataStoreEvent):
            self.columns = get_sheet_columns(entries, self.options)
            self.fire_event("afterParse", {"columns": self.columns})

        event = self.fire_event("parse", {"json": json}, build_columns)
        return not event.default_prevented

    def _schedule_next_fetch(self):
        if not self.options.enable_polling or self._polling_stopped:
            return
        delay = self.options.refresh_delay
        if self._poll_handle is not None:
            self._poll_handle.cancel()
        logger.debug(f"Next fetch in {delay}s")
        self._poll_handle = asyncio.get_running_loop().call_later(delay, self._start_polled_fetch)

    def _start_polled_fetch(self):
        self._poll_handle = None
        self._poll_task = asyncio.ensure_future(self.fetch_sheet())
        self._poll_task.add_done_callback(self._on_polled_fetch_done)

    def _on_polled_fetch_done(self, task: asyncio.Future):
        if task.cancelled():
            return
        if task.exception() is not None:
            logger.error("Polled fetch failed", exc_info=task.exception())


def get_feed_entries(json: Any) -> List[dict]:
    if not isinstance(json, dict):
        return []
    feed = json.get("feed")
    if not isinstance(feed, dict):
        return []
    entries = feed.get("entry")
    if not isinstance(entries, list):
        return []
    return entries

from typing import Optional

import httpx

from datastore.error import FetchError
from datastore.pattern.sheet_options import SheetOptions
from utils.gds_config import get_conf_store
from utils.gds_logger import get_logger

GOOGLE_CONF = get_conf_store("google")
GOOGLE_BASE_URL = GOOGLE_CONF.get("base_url", "https://spreadsheets.google.com/feeds/cells")
GOOGLE_FEED_PATH = GOOGLE_CONF.get("feed_path", "{key}/{worksheet}/public/values?alt=json")
GOOGLE_HEADERS = {
    "User-Agent": GOOGLE_CONF.get("user_agent", "gsheet-datastore"),
}

timeout = httpx.Timeout(GOOGLE_CONF.get("timeout", 25), connect=GOOGLE_CONF.get("timeout", 25))
logger = get_logger()


def get_feed_url(options: SheetOptions) -> str:
    path = GOOGLE_FEED_PATH.format(key=options.google_spreadsheet_key, worksheet=options.worksheet)
    return "/".join([GOOGLE_BASE_URL.rstrip("/"), path])


def build_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=timeout, headers=GOOGLE_HEADERS)


async def fetch_json(url: str, client: Optional[httpx.AsyncClient] = None) -> dict:
    if client is None:
        async with build_client() as client:
            return await fetch_json(url, client)

    try:
        r = await client.get(url)
        r.raise_for_status()
    except httpx.HTTPStatusError as hex:
        raise FetchError(url, status_code=hex.response.status_code) from hex
    except httpx.HTTPError as hex:
        raise FetchError(url, f"{type(hex).__name__} while fetching {url}: {hex}") from hex
    try:
        return r.json()
    except ValueError as jde:
        raise FetchError(url, f"invalid JSON returned by {url}: {jde}") from jde

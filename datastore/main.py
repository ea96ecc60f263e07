import argparse
import asyncio
import sys

from datastore.data_table import DataTable
from datastore.google.google import GoogleDataStore
from datastore.pattern.sheet_options import SheetOptions
from utils.gds_logger import enable_logger_for_debug, enable_logger_for_production, log_table

logger = enable_logger_for_production()


def build_options(args) -> SheetOptions:
    return SheetOptions(
        google_spreadsheet_key=args.key,
        worksheet=args.worksheet,
        start_column=args.start_column,
        end_column=args.end_column if args.end_column is not None else sys.maxsize,
        start_row=args.start_row,
        end_row=args.end_row if args.end_row is not None else sys.maxsize,
        enable_polling=args.poll,
        data_refresh_rate=args.refresh_rate,
    )


async def run(options: SheetOptions, max_rows: int):  # pragma: no cover
    store = GoogleDataStore(DataTable(), options)
    store.on("afterLoad", lambda event: log_table(event["table"], max_rows=max_rows))
    store.on("fail", lambda event: logger.error(f"Unable to load the spreadsheet: {event['text']}"))
    await store.load()
    try:
        while store.is_polling:
            await asyncio.sleep(0.5)
    finally:
        store.stop_polling()


def main():  # pragma: no cover
    parser = argparse.ArgumentParser(description="Load a public Google spreadsheet and print it as a table.")
    parser.add_argument("key", help="spreadsheet key, as found in the sheet url")
    parser.add_argument("--worksheet", "-w", type=int, default=1, help="worksheet number, starting at 1")
    parser.add_argument("--start-column", type=int, default=0)
    parser.add_argument("--end-column", type=int)
    parser.add_argument("--start-row", type=int, default=0)
    parser.add_argument("--end-row", type=int)
    parser.add_argument("--poll", action="store_true", help="reload the sheet until interrupted")
    parser.add_argument("--refresh-rate", type=float, default=2, help="seconds between two loads when polling")
    parser.add_argument("--max-rows", type=int, default=20, help="rows printed for each load")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    if args.debug:
        enable_logger_for_debug()
    try:
        asyncio.run(run(build_options(args), args.max_rows))
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":  # pragma: no cover
    main()

import logging

from terminaltables import AsciiTable


class CustomFormatter(logging.Formatter):
    grey = "\x1b[38;21m"
    yellow = "\x1b[33;21m"
    red = "\x1b[31;21m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"
    format = "%(asctime)s | [%(levelname)s] %(message)s"

    FORMATS = {
        logging.DEBUG: grey + format + reset,
        logging.INFO: grey + format + reset,
        logging.WARNING: yellow + format + reset,
        logging.ERROR: red + format + reset,
        logging.CRITICAL: bold_red + format + reset,
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


def get_logger():
    return logging.getLogger("datastore")


def enable_logger_for_production():
    logger = get_logger()
    logger.setLevel(logging.INFO)

    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setLevel(logging.DEBUG)
        ch.setFormatter(CustomFormatter())
        logger.addHandler(ch)

    return logger


def enable_logger_for_debug():
    # must be called after enable_logger_for_production(), otherwise it'll be partially overridden by it
    logger = get_logger()
    logger.setLevel(logging.DEBUG)

    # drop the "datastore" handler: everything goes through the root logger
    if logger.handlers:
        logger.handlers = []

    root_logger = logging.root
    root_logger.setLevel(logging.DEBUG)

    if not root_logger.handlers:
        ch = logging.StreamHandler()
        ch.setLevel(logging.DEBUG)
        ch.setFormatter(CustomFormatter())
        root_logger.addHandler(ch)

    return logger


def format_table(table, max_rows=None) -> str:
    datatable = [list(table.column_names)]
    for i, row in enumerate(table.row_values()):
        if max_rows is not None and i >= max_rows:
            break
        datatable.append(["" if value is None else str(value) for value in row])
    return AsciiTable(datatable).table


def log_table(table, max_rows=20):
    logger = get_logger()
    if table is None or not table.column_names:
        logger.info("No columns loaded.")
        return
    logger.info(f"Loaded {table.row_count} rows x {len(table.column_names)} columns")
    print(format_table(table, max_rows=max_rows))
    if table.row_count > max_rows:
        logger.info(f"... {table.row_count - max_rows} more rows")

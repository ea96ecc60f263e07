import json
import os
from pathlib import Path

from utils.gds_logger import get_logger

CONFIG_DATA = {}
CONFIG_LOADED = False

logger = get_logger()


def get_config_path() -> Path:
    return Path(os.getenv("GDS_CONFIG", "config.json"))


def get_config() -> dict:
    global CONFIG_DATA, CONFIG_LOADED
    if not CONFIG_LOADED:
        # read once, a missing file means built-in defaults
        CONFIG_LOADED = True
        path = get_config_path()
        try:
            CONFIG_DATA = json.loads(path.read_text(encoding="utf8"))
        except OSError:
            logger.debug(f"No configuration file at {path}, using defaults.")
        except ValueError:
            logger.warning(f"Unable to parse configuration file {path}, using defaults.")
    return CONFIG_DATA


def get_conf_stores() -> dict:
    return get_config().get("stores", {})


def get_conf_store(store: str) -> dict:
    store_conf = get_conf_stores().get(store)
    if not store_conf:
        logger.debug(f"No ’{store}’ store in configuration, using defaults.")
        return {}
    return store_conf

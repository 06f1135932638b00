from hashtable.config import LOGGER_NAME, LOGGING
from hashtable.logger.log_types import LogEvent
import json
import logging
import logging.config

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(config: dict = None):
    """Install the logging config selected in hashtable.config (or the one given)"""
    logging.config.dictConfig(config or LOGGING)


def log_table_event(event: LogEvent, capacity: int, load_factor_threshold: float):
    """Log a table lifecycle event"""
    logger.debug(json.dumps({
        "event": event,
        "capacity": capacity,
        "load_factor_threshold": load_factor_threshold
    }))


def log_rehash_event(event: LogEvent, old_capacity: int, new_capacity: int, num_keys: int):
    """Log a bucket array growth"""
    logger.info(json.dumps({
        "event": event,
        "old_capacity": old_capacity,
        "new_capacity": new_capacity,
        "num_keys": num_keys
    }))

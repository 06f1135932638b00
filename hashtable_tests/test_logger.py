import json
import logging

import pytest

from hashtable.config import (
    DEFAULT_LOGGING,
    PRODUCTION_LOGGING,
    TEST_LOGGING,
    select_logging,
)
from hashtable.exceptions import KeyNotFoundError
from hashtable.hash_table import ChainedHashTable
from hashtable.logger.log_types import LogEvent
from hashtable.logger.logger import configure_logging


def test_table_created_event(mock_logger):
    ChainedHashTable(13, 0.5)

    mock_logger.debug.assert_called_once()
    payload = json.loads(mock_logger.debug.call_args[0][0])
    assert payload == {
        "event": LogEvent.TABLE_CREATED.value,
        "capacity": 13,
        "load_factor_threshold": 0.5
    }


def test_rehash_event(table, nine_keys, mock_logger):
    for key, value in nine_keys:
        table.insert(key, value)

    mock_logger.info.assert_called_once()
    payload = json.loads(mock_logger.info.call_args[0][0])
    assert payload == {
        "event": LogEvent.TABLE_REHASHED.value,
        "old_capacity": 11,
        "new_capacity": 23,
        "num_keys": 9
    }


def test_no_events_on_errors(table, mock_logger):
    mock_logger.reset_mock()
    with pytest.raises(KeyNotFoundError):
        table.get("missing")

    mock_logger.info.assert_not_called()
    mock_logger.error.assert_not_called()


def test_select_logging():
    assert select_logging(True, "token") is TEST_LOGGING
    assert select_logging(False, "token") is PRODUCTION_LOGGING
    assert select_logging(False, None) is DEFAULT_LOGGING


def test_production_logging_uses_logzio():
    handler = PRODUCTION_LOGGING['handlers']['logzio']

    assert handler['class'] == 'logzio.handler.LogzioHandler'
    assert PRODUCTION_LOGGING['loggers']['hashtable']['handlers'] == ['logzio']


def test_configure_logging_installs_null_handler():
    configure_logging(TEST_LOGGING)

    logger = logging.getLogger('hashtable')
    assert logger.propagate is False
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

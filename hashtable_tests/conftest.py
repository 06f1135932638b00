import pytest
import os
from unittest.mock import patch, MagicMock

os.environ.setdefault('TESTING', 'true')

from hashtable.hash_table import ChainedHashTable


@pytest.fixture(autouse=True)
def mock_logger():
    with patch('hashtable.logger.logger.logger') as mock_logger:
        mock_logger.info = MagicMock()
        mock_logger.debug = MagicMock()
        yield mock_logger


@pytest.fixture
def table():
    return ChainedHashTable(11, 0.75)


@pytest.fixture
def default_table():
    return ChainedHashTable()


@pytest.fixture
def colliding_table():
    # every key hashes to the same bucket
    return ChainedHashTable(11, 0.75, hash_function=lambda key: 0)


@pytest.fixture
def nine_keys():
    return [(f"key{i}", i) for i in range(1, 10)]

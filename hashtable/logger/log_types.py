from enum import Enum


class LogEvent(str, Enum):
    TABLE_CREATED = "table_created"
    TABLE_REHASHED = "table_rehashed"

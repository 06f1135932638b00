class HashTableError(Exception):
    pass


class IllegalNullKeyError(HashTableError, ValueError):
    def __init__(self, operation: str):
        super().__init__(f"{operation}() does not accept a None key")
        self.operation = operation


class KeyNotFoundError(HashTableError, KeyError):
    def __init__(self, key):
        super().__init__(key)
        self.key = key

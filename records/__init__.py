"""Record-keeping programs built on a shared keyed repository.

Five small programs (inventory log, warehouse stock, healthcare,
finance, school grades) share two record stores:

- KeyedRepository: in-memory, id-keyed, add/get/update/remove
- FileBackedLog: ordered records saved to and loaded from a JSON file

Usage:
    records inventory inventory.json
    python -m records warehouse
"""

from .exceptions import (
    RecordsError,
    DuplicateKeyError,
    NotFoundError,
    InvalidValueError,
    IOFailureError,
    ParseFailureError,
)
from .repositories import FileBackedLog, KeyedRepository, LoadResult

__all__ = [
    'RecordsError',
    'DuplicateKeyError',
    'NotFoundError',
    'InvalidValueError',
    'IOFailureError',
    'ParseFailureError',
    'FileBackedLog',
    'KeyedRepository',
    'LoadResult',
]

"""Record stores: an in-memory keyed repository and a file-backed log."""

from .base import Identified, Repository
from .file_log import FileBackedLog, LoadResult
from .keyed_repository import KeyedRepository

__all__ = [
    'Identified',
    'Repository',
    'KeyedRepository',
    'FileBackedLog',
    'LoadResult',
]

"""File-backed record log - JSON file implementation."""

from enum import Enum
from pathlib import Path
from typing import Generic, List, Optional, Type, Union

from pydantic import TypeAdapter, ValidationError

from records.exceptions import IOFailureError, ParseFailureError
from records.repositories.base import T

DEFAULT_LOG_FILE = "inventory.json"


class LoadResult(str, Enum):
    """Outcome of FileBackedLog.load()."""
    LOADED = "loaded"
    ABSENT = "absent"
    EMPTY = "empty"
    INVALID = "invalid"


class FileBackedLog(Generic[T]):
    """
    Ordered log of immutable records, persisted to a JSON file on demand.

    Memory and disk are only synchronized by explicit ``save``/``load``
    calls. ``save`` always rewrites the whole file; ``load`` always replaces
    the whole in-memory list.

    Any pydantic model or dataclass pydantic can validate works as a record
    type. Timestamps should use ``records.models.dto.UtcTimestamp`` so the
    file format stays fixed.
    """

    def __init__(self, item_type: Type[T], path: Union[str, Path, None] = None):
        if path is None or not str(path).strip():
            path = DEFAULT_LOG_FILE
        self._path = Path(path)
        self._items: List[T] = []
        self._adapter = TypeAdapter(Optional[List[item_type]])
        self.last_error: Optional[ParseFailureError] = None

    @property
    def path(self) -> Path:
        return self._path

    def add(self, item: T) -> None:
        """Append item in memory; nothing is written."""
        self._items.append(item)

    def get_all(self) -> List[T]:
        """Snapshot of the logged items."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def encode(self) -> str:
        """Serialize the in-memory log to JSON text."""
        return self._adapter.dump_json(self._items, indent=2).decode("utf-8") + "\n"

    def decode(self, text: str) -> Optional[List[T]]:
        """Parse JSON text into records. Returns None for a JSON null."""
        try:
            return self._adapter.validate_json(text)
        except ValidationError as e:
            raise ParseFailureError(f"Failed to parse '{self._path}': {e}") from e

    def save(self) -> None:
        """Overwrite the file with the full log.

        Raises:
            IOFailureError: if the file can't be written. The in-memory
                log is left as it was.
        """
        text = self.encode()
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise IOFailureError(
                self._path, f"Could not write '{self._path}': {e}"
            ) from e

    def load(self) -> LoadResult:
        """Replace the in-memory log with the file contents.

        A missing, blank or unparsable file empties the log and is reported
        through the return value, not raised. For INVALID the parse error
        is kept on ``last_error``.

        Raises:
            IOFailureError: if the file exists but can't be read. The
                in-memory log is left as it was.
        """
        self.last_error = None

        try:
            with open(self._path, encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError:
            self._items.clear()
            return LoadResult.ABSENT
        except UnicodeDecodeError as e:
            self.last_error = ParseFailureError(f"'{self._path}' is not UTF-8 text: {e}")
            self._items.clear()
            return LoadResult.INVALID
        except OSError as e:
            raise IOFailureError(
                self._path, f"Could not read '{self._path}': {e}"
            ) from e

        if not text.strip():
            self._items.clear()
            return LoadResult.EMPTY

        try:
            items = self.decode(text)
        except ParseFailureError as e:
            self.last_error = e
            self._items.clear()
            return LoadResult.INVALID

        if items is None:
            self._items.clear()
            return LoadResult.EMPTY

        self._items[:] = items
        return LoadResult.LOADED

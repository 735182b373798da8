"""Content store for uploaded CV and cover-letter files."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from shortlist_ai.config import UPLOAD_DIR
from shortlist_ai.errors import DocumentNotFound
from shortlist_ai.utils.logger import get_logger

logger = get_logger(__name__)


class DocumentStore(ABC):
    """Abstract document store keyed by filename."""

    @abstractmethod
    def read(self, filename: str) -> bytes:
        """Return the stored bytes. Raises DocumentNotFound if absent."""
        ...

    @abstractmethod
    def has_file(self, filename: str) -> bool:
        ...


class LocalDocumentStore(DocumentStore):
    """Files under a local upload directory; names may not escape it."""

    def __init__(self, upload_dir: Union[str, Path] = UPLOAD_DIR) -> None:
        self._root = Path(upload_dir).resolve()

    def _path(self, filename: str) -> Path:
        path = (self._root / filename).resolve()
        if self._root not in path.parents:
            raise DocumentNotFound(filename)
        return path

    def has_file(self, filename: str) -> bool:
        if not filename:
            return False
        try:
            return self._path(filename).is_file()
        except DocumentNotFound:
            return False

    def read(self, filename: str) -> bytes:
        if not self.has_file(filename):
            raise DocumentNotFound(filename)
        path = self._path(filename)
        logger.debug("Reading %s", path)
        return path.read_bytes()

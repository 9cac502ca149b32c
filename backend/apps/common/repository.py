"""
Whole-document JSON persistence shared by the catalog and the cart.

Each store owns one file holding a JSON array. Reads parse the entire file,
writes replace it. Writes land in a sibling temporary file first and are then
moved over the target with ``os.replace`` so a reader sees either the old or the
new document, never a truncated one.
"""
from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, List, Union

from .logger import get_logger

logger = get_logger(__name__).bind(component="common", layer="repository")


class StoreError(Exception):
    """Base class for persistence failures."""

    def __init__(self, path: Union[str, Path], message: str):
        super().__init__(f"{message}: {path}")
        self.path = Path(path)


class StoreReadError(StoreError):
    """Raised when a document exists but cannot be read or parsed."""


class StoreWriteError(StoreError):
    """Raised when a document cannot be written."""


class JsonDocumentRepository:
    """
    Read and overwrite a JSON array stored at ``path``.

    Args:
        path: Location of the document.
        fail_open: When true an unreadable or corrupt document reads as ``[]``.
            When false the same condition raises ``StoreReadError``. A missing
            file always reads as ``[]``.
    """

    def __init__(self, path: Union[str, Path], *, fail_open: bool = True):
        self.path = Path(path)
        self.fail_open = fail_open
        self.logger = logger.bind(store=type(self).__name__, path=str(self.path))

    def read(self) -> List[Any]:
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            self.logger.debug("Document missing; treating as empty")
            return []
        except (OSError, ValueError) as exc:
            return self._recover(StoreReadError(self.path, "Unreadable document"), exc)
        if not isinstance(data, list):
            return self._recover(
                StoreReadError(self.path, "Document is not a JSON array"),
                TypeError(type(data).__name__),
            )
        return data

    def write(self, items: List[Any]) -> None:
        payload = json.dumps(items, indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            self.logger.error("Document write failed", error=str(exc))
            raise StoreWriteError(self.path, "Unable to write document") from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
        self.logger.debug("Document written", items=len(items))

    def _recover(self, error: StoreReadError, cause: Exception) -> List[Any]:
        if not self.fail_open:
            self.logger.error("Document unreadable", error=str(cause))
            raise error from cause
        self.logger.warning(
            "Document unreadable; treating as empty", error=str(cause)
        )
        return []

"""Application export – CsvBlob and the FileSaver port."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from series_export.config.defaults import EXPORT_FILENAME
from series_export.kernel.errors import FileSaveError
from series_export.observability.logging import get_logger

__all__ = [
    "CSV_MEDIA_TYPE",
    "CsvBlob",
    "EXPORT_FILENAME",
    "FileSaver",
    "InMemoryFileSaver",
    "LocalFileSaver",
    "save_blob",
]

CSV_MEDIA_TYPE = "text/csv;charset=utf-8;header=present;"

_log = get_logger(__name__)


@dataclass(frozen=True)
class CsvBlob:
    """Encoded CSV payload tagged with its media type."""

    data: bytes
    media_type: str = CSV_MEDIA_TYPE

    @classmethod
    def from_text(cls, text: str) -> "CsvBlob":
        return cls(data=text.encode("utf-8"))

    @property
    def size_bytes(self) -> int:
        return len(self.data)


@runtime_checkable
class FileSaver(Protocol):
    """Port: hand a blob to whatever persists or downloads it."""

    def save(self, blob: CsvBlob, filename: str) -> str:
        """Persist *blob* under *filename*; return where it ended up."""
        ...


class LocalFileSaver:
    """Writes blobs into a directory on the local filesystem."""

    def __init__(self, directory: str | Path = ".") -> None:
        self._directory = Path(directory)

    def save(self, blob: CsvBlob, filename: str) -> str:
        if not filename or Path(filename).name != filename:
            raise FileSaveError(filename, f"'{filename}' is not a plain file name")
        target = self._directory / filename
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            target.write_bytes(blob.data)
        except OSError as exc:
            raise FileSaveError(filename, cause=exc) from exc
        _log.debug("export.saved", path=str(target), size_bytes=blob.size_bytes)
        return str(target)


class InMemoryFileSaver:
    """Fake FileSaver for unit tests."""

    def __init__(self) -> None:
        self.files: dict[str, CsvBlob] = {}

    def save(self, blob: CsvBlob, filename: str) -> str:
        self.files[filename] = blob
        return f"memory://{filename}"

    def get(self, filename: str) -> CsvBlob | None:
        return self.files.get(filename)

    def text(self, filename: str) -> str:
        return self.files[filename].data.decode("utf-8")


def save_blob(payload: str, filename: str, saver: FileSaver) -> str:
    """Wrap *payload* in a :class:`CsvBlob` and hand it to *saver*."""
    return saver.save(CsvBlob.from_text(payload), filename)

import zipfile
from pathlib import Path
from typing import IO

from idsort.archive.base import BaseArchiveWriter
from idsort.archive.exceptions import ArchiveError


class ZipArchiveWriter(BaseArchiveWriter):
    """Writes folders and files into a deflated zip archive."""

    def __init__(self, target: Path | IO[bytes]) -> None:
        try:
            self._zip = zipfile.ZipFile(target, mode="w", compression=zipfile.ZIP_DEFLATED)
        except OSError as exc:
            raise ArchiveError(f"Cannot open zip archive {target}: {exc}") from exc

    def add_folder(self, name: str) -> None:
        self._zip.writestr(f"{name}/", b"")

    def add_file(self, folder: str, name: str, data: bytes | str) -> None:
        payload = data.encode("utf-8") if isinstance(data, str) else data
        try:
            self._zip.writestr(f"{folder}/{name}", payload)
        except (OSError, ValueError) as exc:
            raise ArchiveError(f"Cannot write {folder}/{name}: {exc}") from exc

    def close(self) -> None:
        self._zip.close()

from pathlib import Path

from idsort.archive.base import BaseArchiveWriter
from idsort.archive.exceptions import ArchiveError


class DirectoryArchiveWriter(BaseArchiveWriter):
    """Writes folders and files under a root directory on disk."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def add_folder(self, name: str) -> None:
        try:
            (self._root / name).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ArchiveError(f"Cannot create folder {name}: {exc}") from exc

    def add_file(self, folder: str, name: str, data: bytes | str) -> None:
        path = self._root / folder / name
        payload = data.encode("utf-8") if isinstance(data, str) else data
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(payload)
        except OSError as exc:
            raise ArchiveError(f"Cannot write {path}: {exc}") from exc

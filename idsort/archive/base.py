from abc import ABC, abstractmethod


class BaseArchiveWriter(ABC):
    """Contract for all archive writers: named folders holding named files."""

    @abstractmethod
    def add_folder(self, name: str) -> None:
        """Create an empty folder at the archive root."""

    @abstractmethod
    def add_file(self, folder: str, name: str, data: bytes | str) -> None:
        """Write *data* as ``folder/name``; text is stored UTF-8 encoded.

        Raises:
            ArchiveError: if the file cannot be written.
        """

    def close(self) -> None:
        """Flush and release the underlying target."""

    def __enter__(self) -> "BaseArchiveWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

from pathlib import Path

from idsort.archive.base import BaseArchiveWriter
from idsort.archive.directory_writer import DirectoryArchiveWriter
from idsort.archive.zip_writer import ZipArchiveWriter
from idsort.config.settings import Settings


class ArchiveWriterFactory:
    """Creates the archive writer selected in settings."""

    WRITERS: dict[str, type[BaseArchiveWriter]] = {
        "zip": ZipArchiveWriter,
        "directory": DirectoryArchiveWriter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseArchiveWriter:
        archive_format = settings.archive_format.lower()
        writer_cls = cls.WRITERS.get(archive_format)
        if writer_cls is None:
            raise ValueError(
                f"Unknown archive format '{archive_format}'. Choose from: {list(cls.WRITERS)}"
            )
        return writer_cls(Path(settings.output_path))

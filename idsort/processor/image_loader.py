from pathlib import Path

from idsort.filenames.vocabulary import IMAGE_EXTENSIONS
from idsort.logging.logger import Log
from idsort.processor.models import ImageFile


class ImageLoader:
    """Reads the admitted image files of a batch directory."""

    DEFAULT_EXTENSIONS: tuple[str, ...] = IMAGE_EXTENSIONS

    def __init__(self, allowed_extensions: list[str] | tuple[str, ...] | None = None) -> None:
        extensions = allowed_extensions or self.DEFAULT_EXTENSIONS
        self._allowed = {ext.lower().lstrip(".") for ext in extensions}

    def load(self, directory: Path) -> list[ImageFile]:
        """Read every admitted file directly under *directory*, sorted by name.

        Raises:
            FileNotFoundError: if the directory does not exist.
            NotADirectoryError: if the path is not a directory.
        """
        if not directory.exists():
            raise FileNotFoundError(f"Input directory not found: {directory}")
        if not directory.is_dir():
            raise NotADirectoryError(f"Input path is not a directory: {directory}")

        files: list[ImageFile] = []
        for path in sorted(directory.iterdir(), key=lambda p: p.name):
            if not path.is_file():
                continue
            if not self.is_admitted(path.name):
                Log.debug(f"Skipping non-image file {path.name}")
                continue
            files.append(ImageFile(filename=path.name, content=path.read_bytes()))

        Log.info(f"Loaded {len(files)} images from {directory}")
        return files

    def is_admitted(self, filename: str) -> bool:
        return Path(filename).suffix.lower().lstrip(".") in self._allowed

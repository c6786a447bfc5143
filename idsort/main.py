from pathlib import Path

from idsort.archive.factory import ArchiveWriterFactory
from idsort.archive.organizer import ArchiveOrganizer
from idsort.config.settings import Settings
from idsort.logging.logger import Log
from idsort.processor.image_loader import ImageLoader
from idsort.processor.processor import build_processor


def main() -> None:
    """Entry point: load batch -> classify/OCR/extract -> group -> archive."""
    settings = Settings()
    Log.configure(settings.log_level)

    files = ImageLoader(settings.allowed_extensions).load(Path(settings.input_dir))
    processor = build_processor(settings)
    result = processor.process(files)

    with ArchiveWriterFactory.create(settings) as writer:
        ArchiveOrganizer().write(result.clusters, writer)
    Log.info(f"Organized images written to {settings.output_path}")


if __name__ == "__main__":
    main()

import io
import zipfile
from pathlib import Path

import pytest

from idsort.archive.organizer import ArchiveOrganizer
from idsort.archive.zip_writer import ZipArchiveWriter
from idsort.config.settings import Settings
from idsort.ocr.example_adapter import ExampleOcrAdapter
from idsort.processor.image_loader import ImageLoader
from idsort.processor.processor import build_processor

FRONT_TEXT = "DRIVER LICENSE\nSMITH, JOHN\nDOB 01/02/1990 EXP 01/02/2030\nDL D1234567"


@pytest.mark.integration
class TestBatchToArchive:
    def test_license_set_lands_in_one_named_folder(
        self,
        batch_dir: Path,
        sample_png_bytes: bytes,
    ) -> None:
        files = ImageLoader().load(batch_dir)
        engine = ExampleOcrAdapter({sample_png_bytes: FRONT_TEXT})
        result = build_processor(Settings(), ocr_engine=engine).process(files)

        buf = io.BytesIO()
        with ZipArchiveWriter(buf) as writer:
            written = ArchiveOrganizer().write(result.clusters, writer)

        assert written == 4
        with zipfile.ZipFile(io.BytesIO(buf.getvalue())) as archive:
            names = archive.namelist()
            summary = archive.read("John Smith/John_Smith_info.txt").decode("utf-8")

        assert names == [
            "Ungrouped Images/",
            "Ungrouped Images/0042.jpg",
            "John Smith/",
            "John Smith/John_Smith_DL_Front.png",
            "John Smith/John_Smith_DL_Back.jpg",
            "John Smith/John_Smith_Selfie.jpg",
            "John Smith/John_Smith_info.txt",
        ]
        assert "Full Name: JOHN SMITH" in summary
        assert "Date of Birth: 01/02/1990" in summary
        assert "Expiration Date: 01/02/2030" in summary
        assert "License Number: D1234567" in summary

    def test_without_ocr_text_groups_by_filename(self, batch_dir: Path) -> None:
        files = ImageLoader().load(batch_dir)
        result = build_processor(Settings(), ocr_engine=ExampleOcrAdapter()).process(files)

        assert result.completed == 4
        cluster = result.clusters["js_mith"]
        assert len(cluster.images) == 3
        assert cluster.text_data == ""

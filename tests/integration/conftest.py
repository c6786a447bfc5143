from pathlib import Path

import pytest


@pytest.fixture
def batch_dir(tmp_path: Path, sample_png_bytes: bytes, blank_jpeg_bytes: bytes) -> Path:
    """A batch of one person's license front, back and selfie plus strays."""
    directory = tmp_path / "input"
    directory.mkdir()
    (directory / "jsmith_front.png").write_bytes(sample_png_bytes)
    (directory / "jsmith_back.jpg").write_bytes(blank_jpeg_bytes + b"back")
    (directory / "jsmith_selfie.jpg").write_bytes(blank_jpeg_bytes + b"selfie")
    (directory / "0042.jpg").write_bytes(blank_jpeg_bytes + b"stray")
    (directory / "notes.txt").write_text("not an image", encoding="utf-8")
    (directory / "nested").mkdir()
    return directory

import pytest
from pydantic import ValidationError

from idsort.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_archive_format(self) -> None:
        s = Settings()
        assert s.archive_format == "zip"

    def test_default_ocr_engine(self) -> None:
        s = Settings()
        assert s.ocr_engine == "tesseract"

    def test_default_tesseract_options(self) -> None:
        s = Settings()
        assert s.tesseract_lang == "eng"
        assert s.tesseract_oem == 3
        assert s.tesseract_psm == 3

    def test_default_low_confidence_threshold(self) -> None:
        s = Settings()
        assert s.ocr_low_confidence_threshold == 30.0

    def test_default_allowed_extensions(self) -> None:
        s = Settings()
        assert "jpg" in s.allowed_extensions
        assert "png" in s.allowed_extensions


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_input_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INPUT_DIR", "/data/batch")
        s = Settings()
        assert s.input_dir == "/data/batch"

    def test_loads_ocr_engine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_ENGINE", "example")
        s = Settings()
        assert s.ocr_engine == "example"

    def test_loads_allowed_extensions_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ALLOWED_EXTENSIONS", '["png", "tiff"]')
        s = Settings()
        assert s.allowed_extensions == ["png", "tiff"]


class TestSettingsValidation:
    def test_invalid_psm_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TESSERACT_PSM", "auto")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_threshold_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCR_LOW_CONFIDENCE_THRESHOLD", "low")
        with pytest.raises(ValidationError):
            Settings()

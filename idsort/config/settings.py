from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    input_dir: str = "./input"
    output_path: str = "./organized_images.zip"
    archive_format: str = "zip"
    allowed_extensions: list[str] = ["jpg", "jpeg", "png", "gif", "bmp", "webp"]

    ocr_engine: str = "tesseract"
    tesseract_lang: str = "eng"
    tesseract_oem: int = 3
    tesseract_psm: int = 3
    ocr_low_confidence_threshold: float = 30.0

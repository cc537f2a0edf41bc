from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    bucket_name: str = ""
    aws_region: str = "us-west-2"
    content_prefix: str = "urara"
    compute_instance_id: str = ""
    presigned_url_expires_seconds: int = 300

    merged_pdf_path: str = "/tmp/final_merged_document.pdf"

    ocr_provider: str = "gemini"
    ocr_api_key: str = ""
    ocr_model_name: str = "gemini-2.5-pro"
    ocr_base_url: str = ""
    ocr_timeout_seconds: int = 120

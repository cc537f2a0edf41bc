from typing import ClassVar

from archiver.config.settings import Settings
from archiver.ocr.base import BaseOcrClient
from archiver.ocr.example_ocr_adapter import ExampleOcrAdapter
from archiver.ocr.openai_ocr_adapter import OpenAIOcrAdapter


class OcrClientFactory:
    """Creates the configured OCR adapter."""

    PROVIDER_BASE_URLS: ClassVar[dict[str, str | None]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openai": None,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrClient:
        provider = settings.ocr_provider.lower()
        if provider == "example":
            return ExampleOcrAdapter()
        return OpenAIOcrAdapter(
            api_key=settings.ocr_api_key,
            model=settings.ocr_model_name,
            timeout_seconds=settings.ocr_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai_compatible":
            url = settings.ocr_base_url.strip()
            if not url:
                raise ValueError(
                    "ocr_base_url is required for ocr_provider=openai_compatible"
                )
            return url
        if provider in cls.PROVIDER_BASE_URLS:
            return settings.ocr_base_url.strip() or cls.PROVIDER_BASE_URLS[provider]
        supported = ["example", "openai_compatible", *sorted(cls.PROVIDER_BASE_URLS)]
        raise ValueError(f"Unknown OCR provider '{provider}'. Choose from: {supported}")

from archiver.ocr.base import BaseOcrClient
from archiver.ocr.factory import OcrClientFactory
from archiver.ocr.models import OcrResult

__all__ = ["BaseOcrClient", "OcrClientFactory", "OcrResult"]

import base64
from collections.abc import Callable
from datetime import date
from pathlib import Path

import httpx
import openai

from archiver.logging.logger import Log
from archiver.ocr.base import BaseOcrClient
from archiver.ocr.exceptions import OcrError, OcrNetworkError
from archiver.ocr.models import OcrResult, parse_ocr_response
from archiver.ocr.prompt_loader import load_prompt_template, render_prompt


class OpenAIOcrAdapter(BaseOcrClient):
    """OCR through an OpenAI-compatible chat API that accepts PDF file parts."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
        prompt_template_path: Path | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._model = model
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._today = today

    def transcribe(self, pdf_bytes: bytes, excluded_titles: list[str]) -> OcrResult:
        prompt = render_prompt(
            self._prompt_template,
            current_date=self._today().isoformat(),
            excluded_titles=excluded_titles,
        )
        Log.info(f"Sending {len(pdf_bytes)} PDF bytes to OCR model {self._model}")
        raw = self._call_model(pdf_bytes, prompt)
        Log.debug(f"OCR raw response:\n{raw}")
        result = parse_ocr_response(raw)
        Log.info(f"OCR complete, generated title: {result.title}")
        return result

    def _call_model(self, pdf_bytes: bytes, prompt: str) -> str:
        encoded = base64.b64encode(pdf_bytes).decode("ascii")
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {
                                "type": "file",
                                "file": {
                                    "filename": "document.pdf",
                                    "file_data": f"data:application/pdf;base64,{encoded}",
                                },
                            },
                            {"type": "text", "text": prompt},
                        ],
                    }
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise OcrNetworkError(f"OCR provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise OcrNetworkError(f"OCR provider API error: {exc}") from exc

        if not response.choices:
            raise OcrError("OCR provider returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise OcrError("OCR provider returned empty response")
        return content

import io

import pytesseract
from PIL import Image, UnidentifiedImageError

from idmatch.ocr.base import BaseOcrEngine, ProgressCallback, report_progress
from idmatch.ocr.exceptions import OcrError


class TesseractAdapter(BaseOcrEngine):
    """Recognizes document images with a local Tesseract install."""

    def __init__(self, language: str = "eng", tesseract_cmd: str = "") -> None:
        self._language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(
        self,
        image: bytes,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        report_progress(on_progress, 0)
        try:
            with Image.open(io.BytesIO(image)) as img:
                text = pytesseract.image_to_string(img, lang=self._language)
        except UnidentifiedImageError as exc:
            raise OcrError(f"Document is not a readable image: {exc}") from exc
        except OcrError:
            raise
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
        report_progress(on_progress, 100)
        return text

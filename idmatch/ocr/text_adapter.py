from idmatch.ocr.base import BaseOcrEngine, ProgressCallback, report_progress
from idmatch.ocr.exceptions import OcrError


class PlainTextAdapter(BaseOcrEngine):
    """Treats the input as text that was already recognized elsewhere.

    No OCR is performed. Useful for local development, tests, and replaying
    OCR output captured from another system.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def recognize(
        self,
        image: bytes,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        try:
            text = image.decode(self._encoding)
        except UnicodeDecodeError as exc:
            raise OcrError(f"Input is not {self._encoding} text: {exc}") from exc
        report_progress(on_progress, 100)
        return text

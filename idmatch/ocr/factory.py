from idmatch.config.settings import Settings
from idmatch.ocr.base import BaseOcrEngine
from idmatch.ocr.http_adapter import HttpOcrAdapter
from idmatch.ocr.tesseract_adapter import TesseractAdapter
from idmatch.ocr.text_adapter import PlainTextAdapter


class OcrEngineFactory:
    """Creates the OCR adapter selected in settings."""

    ENGINES: tuple[str, ...] = ("tesseract", "http", "text")

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrEngine:
        engine = settings.ocr_engine.lower()
        if engine == "tesseract":
            return TesseractAdapter(
                language=settings.ocr_language,
                tesseract_cmd=settings.tesseract_cmd,
            )
        if engine == "http":
            return HttpOcrAdapter(
                base_url=settings.ocr_http_base_url,
                timeout_seconds=settings.ocr_http_timeout_seconds,
                poll_interval_seconds=settings.ocr_http_poll_interval_seconds,
                wait_seconds=settings.ocr_http_wait_seconds,
            )
        if engine == "text":
            return PlainTextAdapter()
        raise ValueError(
            f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )

from idmatch.ocr.base import BaseOcrEngine
from idmatch.ocr.exceptions import OcrError
from idmatch.ocr.factory import OcrEngineFactory

__all__ = ["BaseOcrEngine", "OcrEngineFactory", "OcrError"]

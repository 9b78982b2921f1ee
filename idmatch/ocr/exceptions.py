class OcrError(Exception):
    """Raised when text recognition fails."""


class OcrNetworkError(OcrError):
    """Raised when the OCR service cannot be reached or answers with an error."""


class OcrTimeoutError(OcrError):
    """Raised when the OCR service does not finish in time."""

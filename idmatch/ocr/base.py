from abc import ABC, abstractmethod
from collections.abc import Callable

ProgressCallback = Callable[[int], None]


class BaseOcrEngine(ABC):
    """Contract for all OCR adapters."""

    @abstractmethod
    def recognize(
        self,
        image: bytes,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        """Recognize all text on a document image.

        Args:
            image: Raw image file content.
            on_progress: Optional callback receiving integer percentages
                         in [0, 100]; called with 100 once text is ready.

        Returns:
            Everything recognized on the image as a single string.

        Raises:
            OcrError: if recognition could not run.
        """


def report_progress(on_progress: ProgressCallback | None, percent: float) -> None:
    """Clamp *percent* to [0, 100] and forward it to the callback, if any."""
    if on_progress is None:
        return
    on_progress(int(max(0, min(100, round(percent)))))

from idmatch.config.settings import Settings
from idmatch.logging.logger import Log
from idmatch.ocr import BaseOcrEngine, OcrEngineFactory, OcrError
from idmatch.ocr.base import ProgressCallback
from idmatch.reconciliation.models import DeclaredFields
from idmatch.reconciliation.reconciler import Reconciler, build_reconciler
from idmatch.verification.models import OcrFailure, VerificationOutcome


class VerificationRunner:
    """Run OCR on one document image, retrying upstream failures, then reconcile."""

    def __init__(
        self,
        ocr_engine: BaseOcrEngine,
        reconciler: Reconciler,
        settings: Settings,
    ) -> None:
        self._ocr_engine = ocr_engine
        self._reconciler = reconciler
        self._settings = settings

    def run(
        self,
        image: bytes,
        declared: DeclaredFields,
        on_progress: ProgressCallback | None = None,
    ) -> VerificationOutcome:
        """Return a verdict, or an OcrFailure once every OCR attempt has failed."""
        max_attempts = max(1, self._settings.max_ocr_attempts)
        attempt = 0
        while True:
            attempt += 1
            Log.info(f"Running OCR (attempt {attempt} of {max_attempts})")
            try:
                text = self._ocr_engine.recognize(image, on_progress)
            except OcrError as exc:
                if attempt >= max_attempts:
                    Log.error(f"OCR permanently failed after {attempt} attempts: {exc}")
                    return OcrFailure(message=str(exc), attempts=attempt)
                Log.warning(f"OCR failed, will retry (attempt {attempt}): {exc}")
                continue
            return self._reconciler.reconcile(declared, text)


def build_runner(settings: Settings) -> VerificationRunner:
    """Build a VerificationRunner with the configured OCR adapter."""
    return VerificationRunner(
        ocr_engine=OcrEngineFactory.create(settings),
        reconciler=build_reconciler(settings),
        settings=settings,
    )

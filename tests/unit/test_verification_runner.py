from unittest.mock import MagicMock

from idmatch.config.settings import Settings
from idmatch.ocr.base import BaseOcrEngine
from idmatch.ocr.exceptions import OcrError, OcrNetworkError
from idmatch.reconciliation.models import DeclaredFields, OverallStatus
from idmatch.reconciliation.reconciler import Reconciler
from idmatch.verification.models import OcrFailure
from idmatch.verification.runner import VerificationRunner, build_runner


def _make_runner(
    engine: MagicMock,
    reconciler: MagicMock | None = None,
    max_ocr_attempts: int = 3,
) -> VerificationRunner:
    return VerificationRunner(
        ocr_engine=engine,
        reconciler=reconciler or MagicMock(spec=Reconciler),
        settings=Settings(max_ocr_attempts=max_ocr_attempts),
    )


class TestVerificationRunner:
    def test_reconciles_recognized_text(self, declared_fields: DeclaredFields) -> None:
        engine = MagicMock(spec=BaseOcrEngine)
        engine.recognize.return_value = "OCR TEXT"
        reconciler = MagicMock(spec=Reconciler)
        runner = _make_runner(engine, reconciler)

        outcome = runner.run(b"image", declared_fields)

        reconciler.reconcile.assert_called_once_with(declared_fields, "OCR TEXT")
        assert outcome is reconciler.reconcile.return_value

    def test_passes_progress_callback(self, declared_fields: DeclaredFields) -> None:
        engine = MagicMock(spec=BaseOcrEngine)
        engine.recognize.return_value = ""
        on_progress = MagicMock()
        _make_runner(engine).run(b"image", declared_fields, on_progress=on_progress)
        engine.recognize.assert_called_once_with(b"image", on_progress)

    def test_retries_after_ocr_error(self, declared_fields: DeclaredFields) -> None:
        engine = MagicMock(spec=BaseOcrEngine)
        engine.recognize.side_effect = [OcrNetworkError("down"), "OCR TEXT"]
        reconciler = MagicMock(spec=Reconciler)

        _make_runner(engine, reconciler).run(b"image", declared_fields)

        assert engine.recognize.call_count == 2
        reconciler.reconcile.assert_called_once_with(declared_fields, "OCR TEXT")

    def test_returns_failure_after_last_attempt(self, declared_fields: DeclaredFields) -> None:
        engine = MagicMock(spec=BaseOcrEngine)
        engine.recognize.side_effect = OcrError("unreadable")
        reconciler = MagicMock(spec=Reconciler)

        outcome = _make_runner(engine, reconciler, max_ocr_attempts=3).run(
            b"image", declared_fields
        )

        assert outcome == OcrFailure(message="unreadable", attempts=3)
        assert engine.recognize.call_count == 3
        reconciler.reconcile.assert_not_called()

    def test_at_least_one_attempt(self, declared_fields: DeclaredFields) -> None:
        engine = MagicMock(spec=BaseOcrEngine)
        engine.recognize.side_effect = OcrError("unreadable")
        outcome = _make_runner(engine, max_ocr_attempts=0).run(b"image", declared_fields)
        assert isinstance(outcome, OcrFailure)
        assert outcome.attempts == 1


class TestBuildRunner:
    def test_end_to_end_with_text_engine(
        self, declared_fields: DeclaredFields, aadhaar_ocr_text: str
    ) -> None:
        runner = build_runner(Settings(ocr_engine="text"))
        outcome = runner.run(aadhaar_ocr_text.encode("utf-8"), declared_fields)
        assert not isinstance(outcome, OcrFailure)
        assert outcome.overall_status is OverallStatus.VALID

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from idmatch.config.settings import Settings
from idmatch.logging.logger import Log
from idmatch.ocr import OcrError
from idmatch.ocr.text_adapter import PlainTextAdapter
from idmatch.reconciliation.exceptions import DeclaredFieldsValidationError
from idmatch.reconciliation.models import DeclaredFields
from idmatch.reconciliation.reconciler import build_reconciler
from idmatch.reconciliation.serializer import VerdictSerializer
from idmatch.reconciliation.validator import validate_declared_fields
from idmatch.verification.models import OcrFailure, VerificationOutcome
from idmatch.verification.runner import build_runner

EXIT_PROCEED = 0
EXIT_INVALID = 1
EXIT_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="idmatch",
        description="Reconcile declared identity fields against a scanned Aadhaar card.",
    )
    parser.add_argument("--name", required=True, help="Full name as declared")
    parser.add_argument("--id-number", required=True, help="12-digit Aadhaar number")
    parser.add_argument("--dob", required=True, help="Date of birth, e.g. 1995-07-14")
    parser.add_argument("--phone", required=True, help="10-digit mobile number")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--image", type=Path, help="Document image to run OCR on")
    source.add_argument("--text", type=Path, help="File holding already-recognized OCR text")
    parser.add_argument("--ocr-engine", help="Override the configured OCR engine")
    parser.add_argument(
        "--skip-validation",
        action="store_true",
        help="Do not check the declared fields before reconciling",
    )
    return parser


def _print_progress(percent: int) -> None:
    Log.debug(f"OCR progress: {percent}%")


def _verify(
    args: argparse.Namespace, declared: DeclaredFields, settings: Settings
) -> VerificationOutcome:
    """Reconcile --text directly or run OCR on --image; unreadable input is an OcrFailure."""
    if args.text is not None:
        try:
            text = PlainTextAdapter().recognize(args.text.read_bytes())
        except (OSError, OcrError) as exc:
            Log.error(f"Cannot read OCR text from {args.text}: {exc}")
            return OcrFailure(message=str(exc), attempts=1)
        return build_reconciler(settings).reconcile(declared, text)

    try:
        image = args.image.read_bytes()
    except OSError as exc:
        Log.error(f"Cannot read document image {args.image}: {exc}")
        return OcrFailure(message=str(exc), attempts=0)
    return build_runner(settings).run(image, declared, on_progress=_print_progress)


def run(argv: Sequence[str] | None = None, settings: Settings | None = None) -> int:
    """Parse arguments, reconcile one document and print the JSON outcome."""
    args = build_parser().parse_args(argv)
    settings = settings or Settings()
    if args.ocr_engine:
        settings = settings.model_copy(update={"ocr_engine": args.ocr_engine})

    declared = DeclaredFields(
        name=args.name,
        id_number=args.id_number,
        date_of_birth=args.dob,
        phone=args.phone,
    )
    if not args.skip_validation:
        try:
            validate_declared_fields(declared)
        except DeclaredFieldsValidationError as exc:
            Log.error(str(exc))
            print(json.dumps({"status": "invalid_input", "errors": exc.errors}, indent=2))
            return EXIT_FAILED

    outcome = _verify(args, declared, settings)
    print(json.dumps(VerdictSerializer().serialize(outcome), indent=2, ensure_ascii=False))
    if isinstance(outcome, OcrFailure):
        return EXIT_FAILED
    return EXIT_PROCEED if outcome.can_proceed else EXIT_INVALID


def main() -> None:
    """Entry point: load settings -> configure logging -> reconcile -> exit code."""
    settings = Settings()
    Log.configure(settings.log_level)
    sys.exit(run(settings=settings))


if __name__ == "__main__":
    main()

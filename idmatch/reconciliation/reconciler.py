from idmatch.config.settings import Settings
from idmatch.logging.logger import Log, mask_digits
from idmatch.reconciliation.models import DeclaredFields, ReconciliationVerdict
from idmatch.reconciliation.pipeline import ReconciliationContext, ReconciliationStep
from idmatch.reconciliation.rules import default_field_rules
from idmatch.reconciliation.steps import AggregateStep, ClassifyDocumentStep, MatchFieldsStep


class Reconciler:
    """Reconciles declared identity fields against OCR text.

    Pipeline: classify -> match fields -> aggregate. A document the
    classifier rejects ends the pipeline early with an invalid verdict.
    Holds no per-document state, so one instance can serve concurrent calls.
    """

    def __init__(self, steps: list[ReconciliationStep]) -> None:
        self._steps = tuple(steps)

    def reconcile(self, declared: DeclaredFields, ocr_text: str) -> ReconciliationVerdict:
        """Run every step on a fresh context and return the verdict."""
        Log.info(
            "Reconciling document",
            id_number=mask_digits(declared.id_number),
            ocr_chars=len(ocr_text or ""),
        )
        context = ReconciliationContext(declared=declared, ocr_text=ocr_text or "")
        for step in self._steps:
            context = step.run(context)
            if context.is_terminal:
                break

        if context.verdict is None:
            raise ValueError("Reconciliation pipeline finished without a verdict")
        Log.info("Reconciliation finished", status=context.verdict.overall_status.value)
        return context.verdict


def build_reconciler(settings: Settings | None = None) -> Reconciler:
    """Build a Reconciler with the default classifier and field rules."""
    rules = (
        default_field_rules(name_threshold=settings.name_match_threshold)
        if settings is not None
        else default_field_rules()
    )
    return Reconciler(
        steps=[
            ClassifyDocumentStep(),
            MatchFieldsStep(rules),
            AggregateStep(rules),
        ]
    )
